# visadesk/tests/test_evaluator.py
from __future__ import annotations

from types import MappingProxyType

import pytest

from visadesk.engine import (
    EVALUATORS,
    ConfigurationError,
    EligibilityResult,
    ReferenceConstants,
    ScoreResult,
    UnknownSchemeError,
    ValidationError,
    evaluate,
    get_reference_constants,
    scheme_catalogue,
)
from visadesk.engine.evaluator import pathways
from visadesk.engine.docs import get_document_checklist
from visadesk.engine.profiles import D10Profile, F27Profile, parse_profile


# -------------------------
# DISPATCH
# -------------------------
def test_every_scheme_has_an_evaluator():
    assert set(EVALUATORS) == {"F-2-7", "E-7", "D-10", "F-5", "F-6", "D-2", "E-9", "D-8"}
    assert len(scheme_catalogue()) == 8


def test_score_and_checklist_result_types():
    assert isinstance(evaluate("F-2-7", {"age": 30}), ScoreResult)
    assert isinstance(evaluate("E-9", {"age": 30}), EligibilityResult)


def test_default_constants_follow_settings():
    result = evaluate("F-2-7", {"age": 30})
    assert result.policy_year == 2026


def test_injected_constants_are_used():
    result = evaluate("F-2-7", {"age": 30, "annualIncome": 5100}, get_reference_constants(2024))
    assert result.policy_year == 2024
    income = next(c for c in result.breakdown if c.key == "income")
    assert income.score == 10


def test_camel_and_snake_case_keys():
    a = evaluate("F-2-7", {"age": 30, "annualIncome": 6000, "topikLevel": 4})
    b = evaluate("F-2-7", {"age": 30, "annual_income": 6000, "topik_level": 4})
    assert a == b


def test_deterministic_output():
    profile = {"subType": "F-6-1", "sponsorAnnualIncome": 3000, "childrenCount": 2, "metInPerson": True}
    assert evaluate("F-6", profile).model_dump_json() == evaluate("F-6", profile).model_dump_json()


# -------------------------
# ERRORS
# -------------------------
def test_unknown_scheme():
    with pytest.raises(UnknownSchemeError) as exc:
        evaluate("H-2", {"age": 30})
    assert exc.value.to_dict()["error"] == "UNKNOWN_SCHEME"
    assert exc.value.field == "schemeId"


def test_out_of_domain_field_is_rejected_not_clamped():
    with pytest.raises(ValidationError) as exc:
        evaluate("F-2-7", {"age": -1})
    assert exc.value.field == "age"
    assert exc.value.kind == "VALIDATION_ERROR"


def test_unknown_enum_value_is_rejected():
    with pytest.raises(ValidationError) as exc:
        evaluate("E-7", {"companySize": "huge"})
    assert exc.value.field == "companySize"


def test_fields_from_another_scheme_are_rejected():
    with pytest.raises(ValidationError) as exc:
        evaluate("F-2-7", {"age": 30, "epsTopikScore": 120})
    assert exc.value.field == "epsTopikScore"


def test_profile_instance_must_match_scheme():
    with pytest.raises(ValidationError):
        evaluate("E-7", F27Profile(age=30))
    assert evaluate("F-2-7", F27Profile(age=30)).scheme_id == "F-2-7"


def test_non_mapping_profile():
    with pytest.raises(ValidationError) as exc:
        parse_profile("D-2", ["not", "a", "profile"])
    assert exc.value.field == "profile"


def test_missing_policy_year():
    with pytest.raises(ConfigurationError) as exc:
        get_reference_constants(1999)
    assert exc.value.field == "policyYear"


# -------------------------
# REFERENCE CONSTANTS
# -------------------------
def test_median_income_extrapolates_past_table():
    c = get_reference_constants(2026)
    assert c.median_income(1) == 3077
    assert c.median_income(6) == 10267
    assert c.median_income(7) == 10267 + (10267 - 9068)


@pytest.mark.parametrize("table", [{1: 3000}, {1: 3000, 3: 6000}, {}])
def test_median_table_must_run_from_one_without_gaps(table):
    with pytest.raises(ConfigurationError) as exc:
        ReferenceConstants(
            policy_year=2030,
            label="2030 schedule",
            gni_per_capita=5200,
            min_annual_wage=2700,
            median_household_income=MappingProxyType(table),
        )
    assert exc.value.field == "medianHouseholdIncome"


def test_median_income_rejects_empty_household():
    with pytest.raises(ConfigurationError):
        get_reference_constants(2026).median_income(0)


def test_constants_are_immutable():
    c = get_reference_constants(2026)
    with pytest.raises(Exception):
        c.gni_per_capita = 1
    with pytest.raises(TypeError):
        c.median_household_income[1] = 1


# -------------------------
# DOCUMENTS
# -------------------------
def test_documents_follow_declared_facts():
    with_spouse = evaluate("F-2-7", {"age": 30, "hasKoreanSpouse": True, "topikLevel": 4})
    assert "혼인관계증명서" in with_spouse.required_documents
    assert "TOPIK 4급 성적표" in with_spouse.required_documents

    without = evaluate("F-2-7", {"age": 30})
    assert "혼인관계증명서" not in without.required_documents
    assert not any("TOPIK" in d for d in without.required_documents)


def test_document_order_and_uniqueness():
    profile = D10Profile(topik_level=5)
    docs = get_document_checklist("D-10", profile)
    assert docs[0] == "사증발급신청서 (별지 제17호서식)"
    assert docs.index("구직활동계획서") < docs.index("TOPIK 5급 성적표")
    assert docs[-1] == "범죄경력증명서 (본국 발급)"
    assert len(docs) == len(set(docs))
    assert docs == get_document_checklist("D-10", profile)


# -------------------------
# PATHWAYS ENTRY POINT
# -------------------------
def test_pathways_entry_point():
    routes = pathways("E-7", "F-5")
    assert routes[0].total_years == 4.0
    assert any(e.to_scheme == "F-2-7" for e in routes[0].edges)


@pytest.mark.parametrize("current, target, field", [
    ("E7", "F-5", "current"),
    ("E-7", "F5", "target"),
    ("H-2", "F-5", "current"),
])
def test_pathways_rejects_unknown_ids(current, target, field):
    with pytest.raises(UnknownSchemeError) as exc:
        pathways(current, target)
    assert exc.value.field == field
    assert exc.value.kind == "UNKNOWN_SCHEME"


def test_pathways_known_ids_without_route_are_empty():
    assert pathways("F-5", "E-7") == []


def test_evaluators_attach_configured_routes():
    result = evaluate("E-9", {"age": 30})
    targets = {r.to_scheme for r in result.pathways}
    assert targets == {"E-7-4", "F-2-7"}

    assert evaluate("F-5", {}).pathways == []
