# visadesk/engine/rules.py
"""
Checklist-based evaluators (D-10, F-5, F-6, D-2, E-9, D-8).

Each scheme computes its predicates once; the active requirement set and
the critical flags come from scheme_config, selected by the profile's
sub-type (or sector for E-9). A predicate returns None when it does not
apply to the applicant, and the check is then left out of the trace.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from . import audit, docs, explain, pathways
from .profiles import (
    EDUCATION_RANK,
    D2Profile,
    D8Profile,
    D10Profile,
    E9Profile,
    F5Profile,
    F6Profile,
    SchemeProfile,
)
from .reference import ReferenceConstants
from .results import EligibilityResult, RequirementCheck
from .scheme_config import EDUCATION_LABELS, get_scheme_config, thresholds_for
from .scoring import percent, ratio, scaled_threshold

Outcome = Optional[Tuple[bool, Optional[str]]]
Checks = Dict[str, Outcome]
Context = Dict[str, Any]


def _check(met: bool, note: Optional[str] = None) -> Outcome:
    return bool(met), note


def _at_least(profile_level: str, minimum: str) -> bool:
    return EDUCATION_RANK[profile_level] >= EDUCATION_RANK[minimum]


# -------------------------
# PER-SCHEME PREDICATES
# -------------------------
def _d10_checks(p: D10Profile, th: dict, constants: ReferenceConstants) -> Tuple[Checks, Context]:
    if p.korean_degree:
        education_ok = _at_least(p.education, "associate")
        origin = "국내"
    else:
        education_ok = _at_least(p.education, "bachelors")
        origin = "해외"

    overseas: Outcome = None
    if not p.korean_degree:
        overseas = _check(
            p.world_top_university or _at_least(p.education, "masters"),
            "세계 500위 이내 대학" if p.world_top_university else None,
        )

    checks: Checks = {
        "education": _check(education_ok, f"{origin} {EDUCATION_LABELS[p.education]}"),
        "bachelor_or_above": _check(_at_least(p.education, "bachelors")),
        "recent_graduate": _check(
            p.years_since_graduation <= th["max_years_since_graduation"],
            f"졸업 후 {p.years_since_graduation:g}년",
        ),
        "degree_certificate": _check(p.has_degree_certificate),
        "no_criminal_record": _check(not p.has_criminal_record),
        "passport_validity": _check(
            p.passport_valid_months >= th["min_passport_months"],
            f"잔여 {p.passport_valid_months}개월",
        ),
        "overseas_university": overseas,
        "oasis_or_ip": _check(
            p.oasis_points > 0 or p.has_ip,
            f"OASIS {p.oasis_points}점" if p.oasis_points else None,
        ),
        "funds": _check(p.bank_balance >= th["min_bank_balance"], f"{p.bank_balance:,}만원"),
        "topik": _check(p.topik_level >= th["min_topik"], f"{p.topik_level}급"),
        "activity_plan": _check(p.has_activity_plan),
    }
    return checks, {}


def _f5_checks(p: F5Profile, th: dict, constants: ReferenceConstants) -> Tuple[Checks, Context]:
    income_floor = scaled_threshold(th["income_gni_ratio"], constants.gni_per_capita)
    income_ratio = ratio(p.annual_income, constants.gni_per_capita)

    checks: Checks = {
        "stay_period": _check(p.stay_years >= th["min_stay_years"], f"{p.stay_years:g}년 체류"),
        "current_status": _check(p.current_visa == "F-2-7", p.current_visa or None),
        "marriage_period": _check(
            p.marriage_years >= th["min_marriage_years"] and p.stay_years >= th["min_stay_years"],
            f"혼인 {p.marriage_years:g}년, 체류 {p.stay_years:g}년",
        ),
        "income": _check(
            p.annual_income >= income_floor,
            f"{p.annual_income:,}만원 (GNI {income_ratio * 100:.0f}%)",
        ),
        "basic_knowledge": _check(
            p.kiip_level >= th["required_kiip_level"] or p.passed_pr_test,
            "영주용 종합평가 합격" if p.passed_pr_test else f"사회통합프로그램 {p.kiip_level}단계",
        ),
        "no_criminal_record": _check(not p.has_criminal_record),
        "no_tax_arrears": _check(not p.has_tax_arrears),
        "assets": _check(p.assets >= th["min_assets"], f"{p.assets:,}만원"),
        "health_insurance": _check(p.health_insurance_paid),
        "investment": _check(p.investment_amount >= th["min_investment"], f"{p.investment_amount:,}만원"),
        "korean_employment": _check(
            p.korean_employees >= th["min_korean_employees"],
            f"{p.korean_employees}명",
        ),
    }
    return checks, {"income_floor": income_floor}


def f6_income_floor(p: F6Profile, th: dict, constants: ReferenceConstants) -> int:
    """Household-size-adjusted income benchmark for the sponsor."""
    median = constants.median_income(p.household_size)
    return scaled_threshold(th["income_median_ratio"], median)


def _f6_checks(p: F6Profile, th: dict, constants: ReferenceConstants) -> Tuple[Checks, Context]:
    income_floor = f6_income_floor(p, th, constants)
    asset_income = p.household_assets * th["asset_income_rate"]
    effective_income = p.sponsor_annual_income + asset_income

    checks: Checks = {
        "marriage_registered_korea": _check(p.marriage_registered_korea),
        "marriage_registered_home": _check(p.marriage_registered_home),
        "sponsor_no_criminal_record": _check(not p.sponsor_criminal_record),
        "household_income": _check(
            effective_income >= income_floor,
            f"인정 소득 {effective_income:,.0f}만원 "
            f"(소득 {p.sponsor_annual_income:,}만원 + 재산 환산 {asset_income:,.0f}만원)",
        ),
        "no_recent_invitation": _check(not p.sponsor_invited_within_5_years),
        "communication": _check(
            p.topik_level >= th["min_topik"] or p.shared_language,
            "공통 언어 사용" if p.shared_language else f"TOPIK {p.topik_level}급",
        ),
        "housing": _check(p.has_housing),
        "korean_child": _check(p.has_korean_child),
        "raising_child": _check(p.raising_child),
        "applicant_no_criminal_record": _check(not p.applicant_criminal_record),
        "marriage_history": _check(p.marriage_registered_korea),
        "dissolution_not_at_fault": _check(p.dissolution_not_at_fault),
    }
    return checks, {"household_size": p.household_size, "income_floor": income_floor}


def _d2_checks(p: D2Profile, th: dict, constants: ReferenceConstants) -> Tuple[Checks, Context]:
    required = p.required_funds(th["living_expenses"])
    rank_labels = {"certified": "인증대학", "general": "일반대학", "restricted": "비자발급 제한대학"}

    checks: Checks = {
        "admission_letter": _check(p.has_admission_letter),
        "education_certificate": _check(p.has_education_certificate),
        "no_criminal_record": _check(not p.has_criminal_record),
        "financial_capacity": _check(p.bank_balance >= required, f"잔고 {p.bank_balance:,}만원"),
        "language": _check(
            p.topik_level >= th["min_topik"] or p.english_proficiency,
            "영어 능력 보유" if p.english_proficiency else f"TOPIK {p.topik_level}급",
        ),
        "institution_accreditation": _check(
            p.institution_rank != "restricted",
            rank_labels[p.institution_rank],
        ),
    }
    return checks, {"required_funds": required}


def _e9_checks(p: E9Profile, th: dict, constants: ReferenceConstants) -> Tuple[Checks, Context]:
    checks: Checks = {
        "age_range": _check(th["min_age"] <= p.age <= th["max_age"], f"만 {p.age}세"),
        "eps_topik": _check(p.eps_topik_score >= th["min_eps_topik"], f"{p.eps_topik_score}점"),
        "skills_test": _check(p.passed_skills_test),
        "no_criminal_record": _check(not p.has_criminal_record),
        "no_deportation": _check(not p.prior_deportation),
        "no_illegal_stay": _check(not p.prior_illegal_stay),
        "health_check": _check(p.passed_health_check),
        "mou_country": _check(p.mou_country),
        "employment_contract": _check(p.has_employment_contract),
        "passport_validity": _check(
            p.passport_valid_months >= th["min_passport_months"],
            f"잔여 {p.passport_valid_months}개월",
        ),
        "safety_training": _check(p.construction_safety_training),
    }
    return checks, {}


def _d8_checks(p: D8Profile, th: dict, constants: ReferenceConstants) -> Tuple[Checks, Context]:
    checks: Checks = {
        "investment": _check(p.investment_amount >= th["min_investment"], f"{p.investment_amount:,}만원"),
        "fdi_registration": _check(p.fdi_registered),
        "business_registration": _check(p.business_registered),
        "funds_source": _check(p.funds_source_proven),
        "no_criminal_record": _check(not p.has_criminal_record),
        "office_lease": _check(p.has_office_lease),
        "korean_employment": _check(
            p.korean_employees >= th["min_korean_employees"],
            f"{p.korean_employees}명",
        ),
        "bachelor_or_above": _check(_at_least(p.education, "bachelors")),
        "oasis_points": _check(p.oasis_points >= th["min_oasis_points"], f"{p.oasis_points}점"),
        "ip": _check(p.has_ip),
    }
    return checks, {}


CHECKLIST_PREDICATES: Dict[str, Callable[[Any, dict, ReferenceConstants], Tuple[Checks, Context]]] = {
    "D-10": _d10_checks,
    "F-5": _f5_checks,
    "F-6": _f6_checks,
    "D-2": _d2_checks,
    "E-9": _e9_checks,
    "D-8": _d8_checks,
}


# -------------------------
# GENERIC CHECKLIST
# -------------------------
def build_requirements(
    scheme_id: str,
    profile: SchemeProfile,
    constants: ReferenceConstants,
) -> List[RequirementCheck]:
    cfg = get_scheme_config(scheme_id)
    variant = profile.variant
    th = thresholds_for(scheme_id, variant)
    checks, context = CHECKLIST_PREDICATES[scheme_id](profile, th, constants)
    label_values = {**th, **context}

    requirements: List[RequirementCheck] = []
    for key, critical in cfg["requirement_sets"][variant].items():
        outcome = checks[key]
        if outcome is None:
            continue
        met, note = outcome
        requirements.append(RequirementCheck(
            key=key,
            item=cfg["requirements"][key].format(**label_values),
            met=met,
            critical=critical,
            note=note,
        ))
    return requirements


def evaluate_checklist(
    scheme_id: str,
    profile: SchemeProfile,
    constants: ReferenceConstants,
) -> EligibilityResult:
    requirements = build_requirements(scheme_id, profile, constants)

    met = sum(1 for r in requirements if r.met)
    score = percent(met, len(requirements))
    # verdict rests on critical checks only; advisory checks move the score
    eligible = all(r.met for r in requirements if r.critical)

    risks = audit.collect_warnings(scheme_id, profile, constants)

    return EligibilityResult(
        scheme_id=scheme_id,
        sub_type=profile.variant,
        policy_year=constants.policy_year,
        eligible=eligible,
        eligibility_score=score,
        requirements=requirements,
        recommendation=explain.checklist_recommendation(scheme_id, eligible, score, requirements),
        warnings=[w.message for w in risks],
        required_documents=docs.get_document_checklist(scheme_id, profile),
        pathways=pathways.attached_pathways(scheme_id, profile),
        processing=audit.estimate_checklist_processing(scheme_id, eligible, score, risks),
    )
