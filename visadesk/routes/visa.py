# visadesk/routes/visa.py
from __future__ import annotations

from fastapi import APIRouter, Query

from .. import schemas
from ..engine import evaluate, get_reference_constants, scheme_catalogue
from ..engine.evaluator import pathways
from ..settings import get_settings

router = APIRouter(prefix="/visa", tags=["visa"])
settings = get_settings()


@router.get("/schemes")
def list_schemes():
    return {
        "rulesetVersion": settings.RULESET_VERSION,
        "policyYear": settings.POLICY_YEAR,
        "schemes": scheme_catalogue(),
    }


@router.post("/evaluate")
def evaluate_profile(payload: schemas.EvaluateRequest):
    constants = None
    if payload.policy_year is not None:
        constants = get_reference_constants(payload.policy_year)

    result = evaluate(payload.scheme_id, payload.profile, constants)
    return result.model_dump(mode="json", by_alias=True)


@router.get("/pathways")
def find_routes(
    current: str = Query(..., min_length=1),
    target: str = Query(..., min_length=1),
):
    out = schemas.PathwaysOut(current=current, target=target, routes=pathways(current, target))
    return out.model_dump(mode="json", by_alias=True)
