# visadesk/engine/points.py
"""
Score-based evaluators (F-2-7, E-7).

Each scheme contributes only an input extractor: it turns the profile into
{dimension_key: (value, note)}. Scoring itself is generic over the
dimension tables in scheme_config, so every dimension is traced once in the
breakdown, zero-scoring ones included.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from . import audit, docs, explain, pathways
from .profiles import EDUCATION_RANK, E7Profile, F27Profile, SchemeProfile
from .reference import ReferenceConstants
from .results import ScoreResult, ScoringCriterion
from .scheme_config import get_scheme_config
from .scoring import apply_brackets, level_score, ratio

DimensionInputs = Dict[str, Tuple[Any, Optional[str]]]


# -------------------------
# INPUT EXTRACTORS
# -------------------------
def _f27_inputs(profile: F27Profile, constants: ReferenceConstants) -> DimensionInputs:
    labels = get_scheme_config("F-2-7")["dimensions"]["education"]["labels"]
    income_ratio = ratio(profile.annual_income, constants.gni_per_capita)
    korean_degree = profile.korean_degree and EDUCATION_RANK[profile.education] >= EDUCATION_RANK["bachelors"]

    return {
        "age": (profile.age, f"만 {profile.age}세"),
        "education": (profile.education, labels[profile.education]),
        "korean_degree": (korean_degree, "국내 학사 이상" if korean_degree else None),
        "topik": (profile.topik_level, f"{profile.topik_level}급"),
        "kiip": (profile.kiip_level, f"{profile.kiip_level}단계"),
        "income": (
            income_ratio,
            f"{profile.annual_income:,}만원 (GNI {income_ratio * 100:.0f}%)",
        ),
        "work_experience": (profile.work_experience_years, f"{profile.work_experience_years:g}년"),
        "volunteer": (profile.volunteer_hours, f"{profile.volunteer_hours}시간"),
        "tax_payment": (profile.tax_payment_years, f"{profile.tax_payment_years:g}년"),
        "special_merit": (profile.has_special_merit, "정부표창 등" if profile.has_special_merit else None),
        "korean_spouse": (profile.has_korean_spouse, None),
        "minor_child": (profile.has_minor_child, None),
    }


def _e7_inputs(profile: E7Profile, constants: ReferenceConstants) -> DimensionInputs:
    dims = get_scheme_config("E-7")["dimensions"]
    salary_ratio = ratio(profile.annual_salary, constants.gni_per_capita)

    return {
        "education": (profile.education, dims["education"]["labels"][profile.education]),
        "field_match": (profile.field_matches_degree, None),
        "career": (profile.work_experience_years, f"{profile.work_experience_years:g}년"),
        "salary": (
            salary_ratio,
            f"{profile.annual_salary:,}만원 (GNI {salary_ratio * 100:.0f}%)",
        ),
        "company_size": (profile.company_size, dims["company_size"]["labels"][profile.company_size]),
        "innopolis": (profile.is_innopolis_company, None),
        "national_cert": (profile.has_national_cert, None),
        "korean_language": (profile.korean_language, dims["korean_language"]["labels"][profile.korean_language]),
    }


SCORE_INPUTS: Dict[str, Callable[[Any, ReferenceConstants], DimensionInputs]] = {
    "F-2-7": _f27_inputs,
    "E-7": _e7_inputs,
}


# -------------------------
# GENERIC SCORING
# -------------------------
def score_dimension(spec: dict, value: Any) -> int:
    if "brackets" in spec:
        points = apply_brackets(value, spec["brackets"])
    elif "levels" in spec:
        points = level_score(value, spec["levels"])
    else:
        points = spec["bonus"] if value else 0
    return min(points, spec["max"])


def build_breakdown(scheme_id: str, inputs: DimensionInputs) -> List[ScoringCriterion]:
    cfg = get_scheme_config(scheme_id)
    breakdown: List[ScoringCriterion] = []
    for key, spec in cfg["dimensions"].items():
        value, note = inputs[key]
        breakdown.append(ScoringCriterion(
            key=key,
            category=spec["category"],
            item=spec["item"],
            score=score_dimension(spec, value),
            max_score=spec["max"],
            note=note,
        ))
    return breakdown


def evaluate_points(
    scheme_id: str,
    profile: SchemeProfile,
    constants: ReferenceConstants,
) -> ScoreResult:
    cfg = get_scheme_config(scheme_id)
    inputs = SCORE_INPUTS[scheme_id](profile, constants)

    breakdown = build_breakdown(scheme_id, inputs)
    total = sum(c.score for c in breakdown)
    passing = cfg["passing_score"]

    tips = explain.improvement_tips(scheme_id, breakdown, inputs, constants)
    risks = audit.collect_warnings(scheme_id, profile, constants)

    return ScoreResult(
        scheme_id=scheme_id,
        policy_year=constants.policy_year,
        total_score=total,
        passing_score=passing,
        max_score=cfg["max_score"],
        is_passing=total >= passing,
        breakdown=breakdown,
        recommendation=explain.score_recommendation(scheme_id, total, passing, tips),
        warnings=[w.message for w in risks],
        required_documents=docs.get_document_checklist(scheme_id, profile),
        pathways=pathways.attached_pathways(scheme_id, profile),
        processing=audit.estimate_score_processing(scheme_id, total - passing, risks),
        improvement_tips=tips,
    )


def evaluate_f27(profile: F27Profile, constants: ReferenceConstants) -> ScoreResult:
    return evaluate_points("F-2-7", profile, constants)


def evaluate_e7(profile: E7Profile, constants: ReferenceConstants) -> ScoreResult:
    return evaluate_points("E-7", profile, constants)
