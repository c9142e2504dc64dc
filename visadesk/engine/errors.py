# visadesk/engine/errors.py
from __future__ import annotations

from typing import Any, Optional


class VisaEngineError(Exception):
    """
    Base error for the evaluation core.

    Every error carries a discriminated `kind`, a human-readable `reason`
    and, where one applies, the offending `field` path.
    """
    kind = "ENGINE_ERROR"

    def __init__(self, reason: str, field: Optional[str] = None):
        super().__init__(reason if field is None else f"{field}: {reason}")
        self.reason = reason
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"error": self.kind, "detail": self.reason}
        if self.field is not None:
            out["field"] = self.field
        return out


class ValidationError(VisaEngineError):
    """A profile field is outside its declared domain."""
    kind = "VALIDATION_ERROR"

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        # pydantic reports every failing field; surface the first one
        errors = exc.errors()
        if not errors:
            return cls("invalid profile", field="profile")
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ())) or "profile"
        return cls(str(first.get("msg", "invalid value")), field=loc)


class UnknownSchemeError(VisaEngineError):
    kind = "UNKNOWN_SCHEME"

    def __init__(self, scheme_id: str, field: str = "schemeId"):
        super().__init__(f"unsupported scheme id '{scheme_id}'", field=field)
        self.scheme_id = scheme_id


class ConfigurationError(VisaEngineError):
    """No reference constants are available for the requested policy year."""
    kind = "CONFIGURATION_ERROR"
