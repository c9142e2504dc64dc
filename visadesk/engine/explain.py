# visadesk/engine/explain.py
"""
Human-readable text for results: recommendation bands and
"+N점" improvement tips.
"""
from __future__ import annotations

from typing import List

from .reference import ReferenceConstants
from .results import RequirementCheck, ScoringCriterion
from .scheme_config import EXPLAIN_BANDS, get_scheme_config
from .scoring import next_bracket, next_level, scaled_threshold


def _tip_for(spec: dict, criterion: ScoringCriterion, value, constants: ReferenceConstants):
    """(gain, text) for the next reachable step of one dimension, or None."""
    if "brackets" in spec:
        step = next_bracket(value, spec["brackets"])
        if step is None:
            return None
        lower, points = step
        target = scaled_threshold(lower, constants.gni_per_capita) if spec.get("scale") == "gni" else lower
    elif "levels" in spec:
        step = next_level(value, spec["levels"])
        if step is None:
            return None
        level, points = step
        target = spec["labels"][level] if "labels" in spec else level
    else:
        if value:
            return None
        points, target = spec["bonus"], None

    gain = min(points, spec["max"]) - criterion.score
    if gain <= 0:
        return None
    return gain, spec["tip"].format(target=target)


def improvement_tips(scheme_id: str, breakdown: List[ScoringCriterion], inputs: dict, constants: ReferenceConstants) -> List[str]:
    dims = get_scheme_config(scheme_id)["dimensions"]
    found = []
    for criterion in breakdown:
        spec = dims[criterion.key]
        if criterion.score >= criterion.max_score:
            continue
        if not spec.get("improvable", True) or "tip" not in spec:
            continue
        tip = _tip_for(spec, criterion, inputs[criterion.key][0], constants)
        if tip:
            found.append(tip)

    # biggest gains first; ties keep dimension order
    found.sort(key=lambda t: -t[0])
    return [f"+{gain}점: {text}" for gain, text in found]


def score_recommendation(scheme_id: str, total: int, passing: int, tips: List[str]) -> str:
    name = get_scheme_config(scheme_id)["name"]
    margin = total - passing

    if margin >= EXPLAIN_BANDS["score_comfortable_margin"]:
        return (
            f"{scheme_id} {name} 신청 요건을 충분히 충족합니다 "
            f"({total}점, 기준 {passing}점 대비 +{margin}점). 서류 준비 후 신청하세요."
        )
    if margin >= 0:
        return (
            f"{scheme_id} 기준 점수를 충족하지만 여유가 {margin}점에 불과합니다. "
            "심사 과정에서 점수가 조정될 수 있으니 추가 점수를 확보해 두는 것을 권장합니다."
        )

    text = f"{scheme_id} 기준 점수({passing}점)에 {-margin}점 부족합니다 (현재 {total}점)."
    top = tips[: EXPLAIN_BANDS["max_tips_in_recommendation"]]
    if top:
        text += " 우선 검토할 항목: " + " / ".join(top)
    return text


def checklist_recommendation(scheme_id: str, eligible: bool, score: int, requirements: List[RequirementCheck]) -> str:
    if not eligible:
        missing = [r.item for r in requirements if r.critical and not r.met]
        return f"{scheme_id} 필수 요건 미충족: " + ", ".join(missing) + ". 해당 요건을 먼저 갖춘 뒤 신청하세요."

    if score >= EXPLAIN_BANDS["checklist_comfortable_score"]:
        return f"{scheme_id} 신청 요건을 충족합니다 (충족률 {score}%). 서류 준비 후 신청하세요."

    advisory = [r.item for r in requirements if not r.critical and not r.met]
    return (
        f"{scheme_id} 필수 요건은 충족하지만 충족률이 {score}%입니다. "
        "다음 권장 요건을 보완하면 심사에 유리합니다: " + ", ".join(advisory)
    )
