# visadesk/engine/profiles.py
"""
Scheme profiles: one input shape per scheme id.

Profiles are immutable and reject unknown fields, so a payload built for
one scheme cannot be evaluated against another. Money is in 만원.
"""
from __future__ import annotations

import math
from typing import Any, ClassVar, Dict, Literal, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .errors import UnknownSchemeError, ValidationError

Education = Literal["doctorate", "masters", "bachelors", "associate", "highschool", "below"]
CompanySize = Literal["large", "medium", "small", "startup"]
KoreanLanguage = Literal["topik3+", "topik2", "kiip3+", "none"]
E7Occupation = Literal["", "E-7-1", "E-7-2", "E-7-3", "E-7-4", "E-7-S"]
InstitutionRank = Literal["certified", "general", "restricted"]
E9Sector = Literal["manufacturing", "construction", "agriculture", "fishery", "service"]

# ordinal rank used by requirement predicates ("bachelors or above")
EDUCATION_RANK: Dict[str, int] = {
    "below": 0,
    "highschool": 1,
    "associate": 2,
    "bachelors": 3,
    "masters": 4,
    "doctorate": 5,
}


class SchemeProfile(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    scheme_id: ClassVar[str] = ""

    @property
    def variant(self) -> Optional[str]:
        """Sub-type tag that selects the requirement set, if the scheme has one."""
        return getattr(self, "sub_type", None)

    @property
    def node(self) -> str:
        """Pathway-graph node the applicant currently occupies."""
        return self.variant or self.scheme_id


# =============================================================================
# SCORE-BASED SCHEMES
# =============================================================================

class F27Profile(SchemeProfile):
    scheme_id: ClassVar[str] = "F-2-7"

    age: int = Field(..., ge=18, le=100)
    annual_income: int = Field(0, ge=0)
    education: Education = "bachelors"
    korean_degree: bool = False
    topik_level: int = Field(0, ge=0, le=6)
    kiip_level: int = Field(0, ge=0, le=5)
    work_experience_years: float = Field(0, ge=0, le=60)
    has_korean_spouse: bool = False
    has_minor_child: bool = False
    volunteer_hours: int = Field(0, ge=0)
    tax_payment_years: float = Field(0, ge=0, le=60)
    has_special_merit: bool = False
    current_visa: str = ""
    stay_years: float = Field(0, ge=0, le=80)


class E7Profile(SchemeProfile):
    scheme_id: ClassVar[str] = "E-7"

    education: Literal["doctorate", "masters", "bachelors", "associate", "highschool"] = "bachelors"
    field_matches_degree: bool = False
    work_experience_years: float = Field(0, ge=0, le=60)
    annual_salary: int = Field(0, ge=0)
    company_size: CompanySize = "small"
    has_national_cert: bool = False
    occupation_code: E7Occupation = ""
    is_innopolis_company: bool = False
    korean_language: KoreanLanguage = "none"

    @property
    def variant(self) -> Optional[str]:
        return self.occupation_code or None

    @property
    def node(self) -> str:
        # only the skilled-worker track has its own routes
        return "E-7-4" if self.occupation_code == "E-7-4" else "E-7"


# =============================================================================
# CHECKLIST SCHEMES
# =============================================================================

class D10Profile(SchemeProfile):
    scheme_id: ClassVar[str] = "D-10"

    sub_type: Literal["D-10-1", "D-10-2"] = "D-10-1"
    education: Education = "bachelors"
    korean_degree: bool = False
    world_top_university: bool = False
    years_since_graduation: float = Field(0, ge=0, le=60)
    has_degree_certificate: bool = False
    bank_balance: int = Field(0, ge=0)
    topik_level: int = Field(0, ge=0, le=6)
    has_activity_plan: bool = False
    has_criminal_record: bool = False
    passport_valid_months: int = Field(0, ge=0, le=240)
    oasis_points: int = Field(0, ge=0)
    has_ip: bool = False


class F5Profile(SchemeProfile):
    scheme_id: ClassVar[str] = "F-5"

    sub_type: Literal["F-5-1", "F-5-2", "F-5-5", "F-5-16"] = "F-5-1"
    current_visa: str = ""
    stay_years: float = Field(0, ge=0, le=80)
    annual_income: int = Field(0, ge=0)
    assets: int = Field(0, ge=0)
    kiip_level: int = Field(0, ge=0, le=5)
    passed_pr_test: bool = False
    has_criminal_record: bool = False
    has_tax_arrears: bool = False
    health_insurance_paid: bool = False
    marriage_years: float = Field(0, ge=0, le=80)
    investment_amount: int = Field(0, ge=0)
    korean_employees: int = Field(0, ge=0)


class F6Profile(SchemeProfile):
    scheme_id: ClassVar[str] = "F-6"

    sub_type: Literal["F-6-1", "F-6-2", "F-6-3"] = "F-6-1"
    marriage_registered_korea: bool = False
    marriage_registered_home: bool = False
    sponsor_annual_income: int = Field(0, ge=0)
    household_assets: int = Field(0, ge=0)
    children_count: int = Field(0, ge=0, le=20)
    other_dependents: int = Field(0, ge=0, le=20)
    topik_level: int = Field(0, ge=0, le=6)
    shared_language: bool = False
    has_housing: bool = False
    sponsor_criminal_record: bool = False
    sponsor_invited_within_5_years: bool = False
    sponsor_prior_invitations: int = Field(0, ge=0, le=20)
    applicant_prior_marriages: int = Field(0, ge=0, le=20)
    sponsor_age: Optional[int] = Field(None, ge=18, le=100)
    applicant_age: Optional[int] = Field(None, ge=18, le=100)
    met_in_person: bool = False
    has_korean_child: bool = False
    raising_child: bool = False
    applicant_criminal_record: bool = False
    dissolution_not_at_fault: bool = False

    @property
    def dependents(self) -> int:
        # the invited spouse counts as the sponsor's first dependent
        return 1 + self.children_count + self.other_dependents

    @property
    def household_size(self) -> int:
        return 1 + self.dependents


class D2Profile(SchemeProfile):
    scheme_id: ClassVar[str] = "D-2"

    sub_type: Literal["D-2-1", "D-2-2", "D-2-3", "D-2-4", "D-2-5", "D-2-6"] = "D-2-2"
    has_admission_letter: bool = False
    has_education_certificate: bool = False
    bank_balance: int = Field(0, ge=0)
    annual_tuition: int = Field(0, ge=0)
    scholarship_fraction: float = Field(0.0, ge=0.0, le=1.0)
    topik_level: int = Field(0, ge=0, le=6)
    english_proficiency: bool = False
    institution_rank: InstitutionRank = "general"
    has_criminal_record: bool = False
    high_overstay_nationality: bool = False

    @property
    def node(self) -> str:
        return "D-2"

    def required_funds(self, living_expenses: int) -> int:
        """Tuition left after scholarship plus one year of living expenses, rounded up."""
        tuition_due = self.annual_tuition * (1 - self.scholarship_fraction)
        return int(math.ceil(round(tuition_due + living_expenses, 6)))


class E9Profile(SchemeProfile):
    scheme_id: ClassVar[str] = "E-9"

    sector: E9Sector = "manufacturing"
    age: int = Field(..., ge=0, le=100)
    eps_topik_score: int = Field(0, ge=0, le=200)
    passed_skills_test: bool = False
    has_criminal_record: bool = False
    prior_deportation: bool = False
    prior_illegal_stay: bool = False
    passed_health_check: bool = False
    mou_country: bool = False
    has_employment_contract: bool = False
    passport_valid_months: int = Field(0, ge=0, le=240)
    construction_safety_training: bool = False
    employer_foreign_worker_ratio: float = Field(0.0, ge=0.0, le=1.0)

    @property
    def variant(self) -> Optional[str]:
        return self.sector

    @property
    def node(self) -> str:
        return "E-9"


class D8Profile(SchemeProfile):
    scheme_id: ClassVar[str] = "D-8"

    sub_type: Literal["D-8-1", "D-8-4"] = "D-8-1"
    investment_amount: int = Field(0, ge=0)
    fdi_registered: bool = False
    business_registered: bool = False
    funds_source_proven: bool = False
    has_criminal_record: bool = False
    has_office_lease: bool = False
    korean_employees: int = Field(0, ge=0)
    education: Education = "bachelors"
    oasis_points: int = Field(0, ge=0)
    has_ip: bool = False


SCHEME_PROFILES: Dict[str, Type[SchemeProfile]] = {
    cls.scheme_id: cls
    for cls in (F27Profile, E7Profile, D10Profile, F5Profile, F6Profile, D2Profile, E9Profile, D8Profile)
}


def parse_profile(scheme_id: str, data: Any) -> SchemeProfile:
    """
    Validate raw input into the scheme's profile model.

    Accepts a mapping (camelCase or snake_case keys) or an already-built
    profile; a profile built for a different scheme is rejected.
    """
    model = SCHEME_PROFILES.get(scheme_id)
    if model is None:
        raise UnknownSchemeError(scheme_id)

    if isinstance(data, SchemeProfile):
        if type(data) is not model:
            raise ValidationError(
                f"{type(data).__name__} does not match scheme {scheme_id} "
                f"(expected {model.__name__})",
                field="profile",
            )
        return data

    if not isinstance(data, Mapping):
        raise ValidationError("profile must be an object", field="profile")

    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
