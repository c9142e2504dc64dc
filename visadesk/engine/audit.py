# visadesk/engine/audit.py
"""
Advisory risk rules and processing-time estimates.

Warnings never change a verdict. They only feed the interview-likelihood
estimate and are shown next to the result for a reviewer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from .profiles import D2Profile, D8Profile, D10Profile, E7Profile, E9Profile, F5Profile, F6Profile, F27Profile
from .reference import ReferenceConstants
from .results import ProcessingEstimate
from .scheme_config import INTERVIEW_RULES, get_scheme_config, thresholds_for
from .scoring import scaled_threshold


@dataclass(frozen=True)
class RiskWarning:
    code: str
    message: str
    raises_interview: bool = False


# -------------------------
# PER-SCHEME RISK RULES
# -------------------------
def _f27_warnings(p: F27Profile, constants: ReferenceConstants) -> List[RiskWarning]:
    th = thresholds_for("F-2-7")
    out: List[RiskWarning] = []
    if p.current_visa in th["low_skill_statuses"]:
        out.append(RiskWarning(
            "low_skill_status",
            f"현재 체류자격({p.current_visa})은 F-2-7 변경 대상이 아닐 수 있습니다. "
            "전문인력 체류자격 보유 여부를 먼저 확인하세요.",
        ))
    if p.stay_years < th["warn_min_stay_years"]:
        out.append(RiskWarning(
            "short_stay",
            f"국내 체류기간이 {th['warn_min_stay_years']}년 미만입니다. 체류기간 요건을 확인하세요.",
        ))
    return out


def _e7_warnings(p: E7Profile, constants: ReferenceConstants) -> List[RiskWarning]:
    th = thresholds_for("E-7")
    out: List[RiskWarning] = []
    if p.annual_salary < constants.min_annual_wage:
        out.append(RiskWarning(
            "below_minimum_wage",
            f"연봉이 최저임금 기준({constants.min_annual_wage:,}만원) 미달입니다. "
            "E-7 비자 발급이 거부될 수 있습니다.",
        ))
    salary_floor = scaled_threshold(th["min_salary_gni_ratio"], constants.gni_per_capita)
    if p.annual_salary < salary_floor:
        out.append(RiskWarning(
            "below_gni_wage_floor",
            f"연봉이 GNI의 {th['min_salary_gni_ratio'] * 100:.0f}%({salary_floor:,}만원) 미만입니다. "
            "고용추천 심사에서 임금요건을 충족하지 못할 수 있습니다.",
        ))
    if (
        p.occupation_code == "E-7-4"
        and p.education == "highschool"
        and p.work_experience_years < th["skilled_worker_min_years"]
    ):
        out.append(RiskWarning(
            "skilled_worker_experience",
            f"E-7-4(숙련기능인력)은 고졸의 경우 최소 {th['skilled_worker_min_years']}년 경력이 필요합니다.",
        ))
    return out


def _d10_warnings(p: D10Profile, constants: ReferenceConstants) -> List[RiskWarning]:
    th = thresholds_for("D-10", p.sub_type)
    out: List[RiskWarning] = []
    if th["warn_years_since_graduation"] < p.years_since_graduation <= th["max_years_since_graduation"]:
        out.append(RiskWarning(
            "late_graduate",
            f"졸업 후 {th['warn_years_since_graduation']}년이 지났습니다. "
            "구직활동 허용 기간이 짧게 부여될 수 있습니다.",
        ))
    return out


def _f5_warnings(p: F5Profile, constants: ReferenceConstants) -> List[RiskWarning]:
    cfg = get_scheme_config("F-5")
    th = thresholds_for("F-5", p.sub_type)
    out: List[RiskWarning] = []
    if cfg["requirement_sets"][p.sub_type].get("income"):
        floor = scaled_threshold(th["income_gni_ratio"], constants.gni_per_capita)
        comfortable = scaled_threshold(th["warn_income_gni_ratio"], constants.gni_per_capita)
        if floor <= p.annual_income < comfortable:
            out.append(RiskWarning(
                "marginal_livelihood",
                f"소득이 GNI 대비 {th['warn_income_gni_ratio'] * 100:.0f}% 미만입니다. "
                "생계유지능력 심사가 엄격하게 진행될 수 있습니다.",
            ))
    return out


def _f6_warnings(p: F6Profile, constants: ReferenceConstants) -> List[RiskWarning]:
    th = thresholds_for("F-6", p.sub_type)
    out: List[RiskWarning] = []
    if p.sub_type != "F-6-1":
        return out

    if p.sponsor_age is not None and p.applicant_age is not None:
        gap = abs(p.sponsor_age - p.applicant_age)
        if gap >= th["warn_age_gap"]:
            out.append(RiskWarning(
                "large_age_gap",
                f"부부 나이 차이가 {gap}세입니다. 혼인의 진정성 확인을 위한 인터뷰가 진행될 수 있습니다.",
                raises_interview=True,
            ))
    if (
        p.sponsor_prior_invitations >= th["warn_prior_count"]
        or p.applicant_prior_marriages >= th["warn_prior_count"]
    ):
        out.append(RiskWarning(
            "repeat_marriage",
            "초청인의 외국인 배우자 초청 이력 또는 신청인의 혼인 이력이 많습니다. 심사가 강화될 수 있습니다.",
            raises_interview=True,
        ))
    if not p.met_in_person:
        out.append(RiskWarning(
            "no_in_person_meeting",
            "직접 만남(교제) 입증자료가 없습니다. 사진·항공권·메시지 기록 등을 준비하세요.",
            raises_interview=True,
        ))
    if not p.shared_language and p.topik_level < th["min_topik"]:
        out.append(RiskWarning(
            "no_shared_language",
            "부부 간 의사소통 가능 입증이 부족합니다. 공통 언어 사용 증빙 또는 한국어 능력을 준비하세요.",
            raises_interview=True,
        ))
    return out


def _d2_warnings(p: D2Profile, constants: ReferenceConstants) -> List[RiskWarning]:
    th = thresholds_for("D-2", p.sub_type)
    out: List[RiskWarning] = []
    if p.institution_rank == "restricted":
        out.append(RiskWarning(
            "restricted_institution",
            "비자발급 제한 대학입니다. 사증 발급이 제한되거나 추가 심사가 진행될 수 있습니다.",
            raises_interview=True,
        ))
    if p.high_overstay_nationality:
        out.append(RiskWarning(
            "high_overstay_nationality",
            "불법체류 다발국가 국적자는 재정능력·학업계획 서류 심사가 강화됩니다.",
            raises_interview=True,
        ))
    required = p.required_funds(th["living_expenses"])
    if required <= p.bank_balance < required * (1 + th["warn_funds_margin"]):
        out.append(RiskWarning(
            "thin_funds",
            "잔고가 요구 금액에 근접합니다. 입국 후 체류비용 부족으로 판단되지 않도록 여유 자금을 확보하세요.",
        ))
    return out


def _e9_warnings(p: E9Profile, constants: ReferenceConstants) -> List[RiskWarning]:
    th = thresholds_for("E-9", p.sector)
    out: List[RiskWarning] = []
    if p.employer_foreign_worker_ratio >= th["warn_foreign_worker_ratio"]:
        out.append(RiskWarning(
            "foreign_worker_concentration",
            f"고용업체의 외국인 근로자 비율이 {p.employer_foreign_worker_ratio * 100:.0f}%입니다. "
            "고용허가 한도 초과 여부를 확인하세요.",
        ))
    if th["min_eps_topik"] <= p.eps_topik_score < th["min_eps_topik"] + th["warn_eps_margin"]:
        out.append(RiskWarning(
            "eps_topik_borderline",
            "EPS-TOPIK 점수가 합격선에 근접합니다. 구직자 명부 선발에서 불리할 수 있습니다.",
        ))
    if th["warn_age"] <= p.age <= th["max_age"]:
        out.append(RiskWarning(
            "age_limit_near",
            f"연령 상한({th['max_age']}세)에 근접했습니다. 절차 지연 시 자격을 잃을 수 있습니다.",
        ))
    return out


def _d8_warnings(p: D8Profile, constants: ReferenceConstants) -> List[RiskWarning]:
    th = thresholds_for("D-8", p.sub_type)
    out: List[RiskWarning] = []
    if p.sub_type == "D-8-1":
        minimum = th["min_investment"]
        if minimum <= p.investment_amount < minimum * (1 + th["warn_investment_margin"]):
            out.append(RiskWarning(
                "minimum_investment",
                "투자금이 최저 기준에 근접합니다. 실제 투자 여부 확인 심사가 강화될 수 있습니다.",
                raises_interview=True,
            ))
    if p.korean_employees == 0:
        out.append(RiskWarning(
            "no_korean_employees",
            "내국인 고용 실적이 없습니다. 체류기간 연장 심사에서 불리할 수 있습니다.",
        ))
    return out


WARNING_RULES: Dict[str, Callable[..., List[RiskWarning]]] = {
    "F-2-7": _f27_warnings,
    "E-7": _e7_warnings,
    "D-10": _d10_warnings,
    "F-5": _f5_warnings,
    "F-6": _f6_warnings,
    "D-2": _d2_warnings,
    "E-9": _e9_warnings,
    "D-8": _d8_warnings,
}


def collect_warnings(scheme_id: str, profile, constants: ReferenceConstants) -> List[RiskWarning]:
    return WARNING_RULES[scheme_id](profile, constants)


# -------------------------
# PROCESSING ESTIMATES
# -------------------------
def _estimate(scheme_id: str, likelihood: str, note: str) -> ProcessingEstimate:
    policy = get_scheme_config(scheme_id)["processing"]
    return ProcessingEstimate(
        standard_days=policy["standard_days"],
        fast_track_days=policy["fast_track_days"] if likelihood == "low" else None,
        interview_likelihood=likelihood,
        note=note,
    )


def estimate_score_processing(scheme_id: str, margin: int, risks: List[RiskWarning]) -> ProcessingEstimate:
    if margin < 0:
        return _estimate(scheme_id, "high", "기준 점수 미달로 보완 요청 또는 면접 가능성이 높습니다.")
    if margin >= INTERVIEW_RULES["score_low_margin"] and not risks:
        return _estimate(scheme_id, "low", "기준 점수를 여유 있게 충족합니다.")
    return _estimate(scheme_id, "medium", "기준 점수 근처이거나 확인이 필요한 사항이 있습니다.")


def estimate_checklist_processing(
    scheme_id: str,
    eligible: bool,
    score: int,
    risks: List[RiskWarning],
) -> ProcessingEstimate:
    if not eligible:
        return _estimate(scheme_id, "high", "필수 요건 미충족으로 보완 요청 가능성이 높습니다.")
    if any(r.raises_interview for r in risks):
        return _estimate(scheme_id, "high", "심사관 면접 대상이 될 수 있는 위험 요인이 있습니다.")
    if score >= INTERVIEW_RULES["checklist_low_score"] and not risks:
        return _estimate(scheme_id, "low", "요건을 대부분 충족합니다.")
    return _estimate(scheme_id, "medium", "일부 권장 요건이 미충족이거나 확인이 필요한 사항이 있습니다.")
