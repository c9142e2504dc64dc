# visadesk/schemas.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .engine.results import Route


class EvaluateRequest(BaseModel):
    scheme_id: str = Field(..., min_length=1)
    profile: Dict[str, Any]
    policy_year: Optional[int] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PathwaysOut(BaseModel):
    current: str
    target: str
    routes: List[Route]
