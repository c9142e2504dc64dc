# visadesk/engine/evaluator.py
"""
Evaluation façade.

evaluate() validates the profile, resolves the reference constants and
dispatches to the scheme's evaluator. All input errors are raised before
any scoring starts.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from ..logging_config import log_event, log_failure
from ..settings import get_settings
from . import pathways as pathway_graph
from .errors import UnknownSchemeError, VisaEngineError
from .points import evaluate_e7, evaluate_f27
from .profiles import SCHEME_PROFILES, parse_profile
from .reference import ReferenceConstants, get_reference_constants
from .results import EligibilityResult, Route, ScoreResult
from .rules import evaluate_checklist
from .scheme_config import get_scheme_config

Result = Union[ScoreResult, EligibilityResult]


def _checklist(scheme_id: str) -> Callable[[Any, ReferenceConstants], EligibilityResult]:
    def run(profile, constants: ReferenceConstants) -> EligibilityResult:
        return evaluate_checklist(scheme_id, profile, constants)
    run.__name__ = "evaluate_" + scheme_id.replace("-", "").lower()
    return run


EVALUATORS: Dict[str, Callable[[Any, ReferenceConstants], Result]] = {
    "F-2-7": evaluate_f27,
    "E-7": evaluate_e7,
    "D-10": _checklist("D-10"),
    "F-5": _checklist("F-5"),
    "F-6": _checklist("F-6"),
    "D-2": _checklist("D-2"),
    "E-9": _checklist("E-9"),
    "D-8": _checklist("D-8"),
}


def evaluate(
    scheme_id: str,
    profile: Any,
    constants: Optional[ReferenceConstants] = None,
) -> Result:
    try:
        evaluator = EVALUATORS.get(scheme_id)
        if evaluator is None:
            raise UnknownSchemeError(scheme_id)
        if constants is None:
            constants = get_reference_constants(get_settings().POLICY_YEAR)
        parsed = parse_profile(scheme_id, profile)
    except VisaEngineError as exc:
        log_failure(exc.kind, {"scheme_id": scheme_id, **exc.to_dict()})
        raise

    result = evaluator(parsed, constants)

    if isinstance(result, ScoreResult):
        outcome = {"total_score": result.total_score, "is_passing": result.is_passing}
    else:
        outcome = {"eligibility_score": result.eligibility_score, "eligible": result.eligible}
    log_event("EVALUATE", f"{scheme_id} evaluated", {
        "scheme_id": scheme_id,
        "sub_type": parsed.variant,
        "policy_year": constants.policy_year,
        **outcome,
    })
    return result


def pathways(current: str, target: str, max_hops: Optional[int] = None) -> List[Route]:
    for field, scheme_id in (("current", current), ("target", target)):
        if not pathway_graph.known_node(scheme_id):
            exc = UnknownSchemeError(scheme_id, field=field)
            log_failure(exc.kind, {"scheme_id": scheme_id, **exc.to_dict()})
            raise exc

    routes = pathway_graph.find_pathways(current, target, max_hops)
    log_event("PATHWAYS", f"{current} -> {target}", {"routes": len(routes)})
    return routes


def scheme_catalogue() -> List[dict]:
    """Id, name, kind and sub-types of every supported scheme."""
    out = []
    for scheme_id in SCHEME_PROFILES:
        cfg = get_scheme_config(scheme_id)
        entry = {
            "schemeId": scheme_id,
            "name": cfg["name"],
            "kind": cfg["kind"],
            "subTypes": list(cfg.get("sub_types", [])),
            "forms": list(cfg.get("forms", [])),
        }
        if cfg["kind"] == "score":
            entry["passingScore"] = cfg["passing_score"]
            entry["maxScore"] = cfg["max_score"]
            entry["categories"] = list(dict.fromkeys(d["category"] for d in cfg["dimensions"].values()))
        out.append(entry)
    return out
