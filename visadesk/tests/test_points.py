# visadesk/tests/test_points.py
from __future__ import annotations

import pytest

from visadesk.engine.points import evaluate_e7, evaluate_f27
from visadesk.engine.profiles import E7Profile, F27Profile
from visadesk.engine.reference import get_reference_constants
from visadesk.engine.scoring import apply_brackets, next_bracket, percent, scaled_threshold

C2026 = get_reference_constants(2026)
C2024 = get_reference_constants(2024)


def _score(result, key: str) -> int:
    return next(c.score for c in result.breakdown if c.key == key)


def _strong_f27(**overrides) -> F27Profile:
    data = dict(
        age=27,
        education="doctorate",
        korean_degree=True,
        topik_level=6,
        kiip_level=5,
        annual_income=15000,
        stay_years=3,
    )
    data.update(overrides)
    return F27Profile(**data)


# -------------------------
# BRACKET HELPERS
# -------------------------
def test_apply_brackets_picks_highest_reached_bound():
    table = ((0, 0), (1, 4), (3, 7), (5, 10))
    assert apply_brackets(0, table) == 0
    assert apply_brackets(2.9, table) == 4
    assert apply_brackets(3, table) == 7
    assert apply_brackets(40, table) == 10


def test_apply_brackets_below_table_scores_zero():
    assert apply_brackets(17, ((18, 20), (23, 23))) == 0


def test_next_bracket_skips_non_improving_steps():
    age_table = ((18, 20), (23, 23), (26, 25), (29, 23))
    # already on the best bracket: later brackets score less
    assert next_bracket(27, age_table) is None
    assert next_bracket(2, ((0, 0), (1, 4), (3, 7))) == (3, 7)


def test_scaled_threshold_rounds_up():
    assert scaled_threshold(1.2, 4995) == 5994
    assert scaled_threshold(0.5, 5039) == 2520


def test_percent_rounds_half_up():
    assert percent(9, 10) == 90
    assert percent(1, 8) == 13
    assert percent(0, 0) == 0


# -------------------------
# F-2-7
# -------------------------
def test_f27_age_27_gets_full_age_points():
    result = evaluate_f27(F27Profile(age=27), C2026)
    assert _score(result, "age") == 25


@pytest.mark.parametrize("age, expected", [
    (18, 20),
    (25, 20),
    (26, 25),
    (30, 25),
    (31, 23),
    (35, 23),
    (36, 20),
    (40, 20),
    (41, 15),
    (45, 15),
    (46, 10),
    (50, 10),
    (51, 5),
])
def test_f27_age_brackets(age, expected):
    result = evaluate_f27(F27Profile(age=age), C2026)
    assert _score(result, "age") == expected


@pytest.mark.parametrize("income, expected", [
    (3 * 4995, 20),  # 3.0x GNI
    (20000, 20),
    (5000, 8),       # ~1.0x
    (5900, 8),       # ~1.18x
    (5994, 10),      # exactly 1.2x
    (0, 0),
])
def test_f27_income_ratio_brackets(income, expected):
    result = evaluate_f27(F27Profile(age=30, annual_income=income), C2026)
    assert _score(result, "income") == expected


def test_f27_breakdown_lists_every_dimension_once():
    result = evaluate_f27(F27Profile(age=60), C2026)
    keys = [c.key for c in result.breakdown]
    assert len(keys) == 12
    assert len(set(keys)) == 12
    assert _score(result, "special_merit") == 0


def test_f27_korean_degree_needs_bachelors():
    below = evaluate_f27(F27Profile(age=30, education="associate", korean_degree=True), C2026)
    assert _score(below, "korean_degree") == 0
    bachelors = evaluate_f27(F27Profile(age=30, korean_degree=True), C2026)
    assert _score(bachelors, "korean_degree") == 5


def test_f27_sum_and_threshold_invariants():
    profiles = [
        F27Profile(age=19),
        F27Profile(age=45, education="highschool", annual_income=3000),
        _strong_f27(),
        _strong_f27(has_korean_spouse=True, has_minor_child=True, has_special_merit=True),
    ]
    for profile in profiles:
        result = evaluate_f27(profile, C2026)
        assert result.total_score == sum(c.score for c in result.breakdown)
        assert all(0 <= c.score <= c.max_score for c in result.breakdown)
        assert result.is_passing == (result.total_score >= result.passing_score)
        assert result.passing_score == 80
        assert result.max_score == 120


def test_f27_monotonic_in_income_and_experience():
    totals = [
        evaluate_f27(F27Profile(age=30, annual_income=income), C2026).total_score
        for income in range(0, 20000, 250)
    ]
    assert totals == sorted(totals)

    totals = [
        evaluate_f27(F27Profile(age=30, work_experience_years=years), C2026).total_score
        for years in (0, 0.5, 1, 2, 3, 4, 5, 8, 20)
    ]
    assert totals == sorted(totals)


def test_f27_same_income_scores_by_schedule_year():
    # 5100 is exactly 1.2x the 2024 GNI but only ~1.02x the 2026 GNI
    profile = F27Profile(age=30, annual_income=5100)
    assert _score(evaluate_f27(profile, C2024), "income") == 10
    assert _score(evaluate_f27(profile, C2026), "income") == 8


def test_f27_comfortable_pass():
    result = evaluate_f27(_strong_f27(), C2026)
    assert result.total_score == 110
    assert result.is_passing
    assert "충분히 충족" in result.recommendation
    assert result.warnings == []
    assert result.processing.interview_likelihood == "low"
    assert result.processing.standard_days == 60


def test_f27_failing_states_gap_and_tips():
    result = evaluate_f27(F27Profile(age=46, stay_years=2), C2026)
    # age 10 + bachelors 25
    assert result.total_score == 35
    assert not result.is_passing
    assert "45점 부족" in result.recommendation
    assert result.improvement_tips[0] in result.recommendation
    assert result.processing.interview_likelihood == "high"
    assert result.processing.fast_track_days is None


def test_f27_tips_read_the_next_bracket():
    result = evaluate_f27(F27Profile(age=30, topik_level=3, annual_income=5000), C2026)
    assert "+3점: TOPIK 4급 취득 시" in result.improvement_tips
    assert "+2점: 연간 소득 5,994만원 이상 달성 시" in result.improvement_tips
    assert "+5점: 최종학력 석사 취득 시" in result.improvement_tips


def test_f27_no_tips_for_fixed_dimensions():
    result = evaluate_f27(F27Profile(age=52), C2026)
    assert not any("배우자" in tip or "자녀" in tip for tip in result.improvement_tips)
    # every tip is a positive gain
    assert all(tip.startswith("+") for tip in result.improvement_tips)


def test_f27_short_stay_warning_keeps_verdict():
    settled = evaluate_f27(_strong_f27(), C2026)
    recent = evaluate_f27(_strong_f27(stay_years=0.5), C2026)
    assert "국내 체류기간이 1년 미만입니다. 체류기간 요건을 확인하세요." in recent.warnings
    assert recent.total_score == settled.total_score
    assert recent.is_passing == settled.is_passing
    assert recent.processing.interview_likelihood == "medium"


def test_f27_low_skill_status_warning():
    result = evaluate_f27(_strong_f27(current_visa="E-9"), C2026)
    assert result.is_passing
    assert any("E-9" in w for w in result.warnings)
    assert result.processing.interview_likelihood == "medium"


# -------------------------
# E-7
# -------------------------
def _e7(**overrides) -> E7Profile:
    data = dict(
        education="bachelors",
        field_matches_degree=True,
        work_experience_years=3,
        annual_salary=5000,
        company_size="large",
        has_national_cert=True,
    )
    data.update(overrides)
    return E7Profile(**data)


def test_e7_marginal_pass():
    result = evaluate_e7(_e7(), C2026)
    # 20 + 5 + 10 + 10 + 10 + 5
    assert result.total_score == 60
    assert result.is_passing
    assert "여유가 0점" in result.recommendation
    assert result.processing.interview_likelihood == "medium"
    assert result.processing.fast_track_days is None


def test_e7_fast_track_only_when_interview_unlikely():
    result = evaluate_e7(_e7(education="doctorate", work_experience_years=10, annual_salary=12000), C2026)
    assert result.total_score - result.passing_score >= 10
    assert result.processing.interview_likelihood == "low"
    assert result.processing.fast_track_days == 14


def test_e7_salary_warnings_do_not_change_score_verdict():
    result = evaluate_e7(_e7(annual_salary=2000, work_experience_years=10), C2026)
    assert _score(result, "salary") == 0
    assert len(result.warnings) == 2
    assert "최저임금" in result.warnings[0]
    assert result.is_passing == (result.total_score >= 60)


def test_e7_skilled_worker_experience_warning():
    result = evaluate_e7(_e7(education="highschool", occupation_code="E-7-4", work_experience_years=3), C2026)
    assert any("E-7-4" in w for w in result.warnings)
    assert "숙련기능인력 점수표 및 입증서류" in result.required_documents


def test_e7_company_size_has_no_tip():
    result = evaluate_e7(_e7(company_size="startup"), C2026)
    assert _score(result, "company_size") == 3
    assert not any("기업" in tip for tip in result.improvement_tips)
    assert len(result.breakdown) == 8


def test_e7_routes_leave_from_general_track():
    result = evaluate_e7(_e7(occupation_code="E-7-1"), C2026)
    assert result.pathways
    assert all(r.from_scheme == "E-7" for r in result.pathways)
    assert all(r.edges[0].from_scheme == "E-7" for r in result.pathways)


def test_e7_skilled_worker_routes_leave_from_skilled_track():
    result = evaluate_e7(_e7(occupation_code="E-7-4"), C2026)
    assert result.pathways
    assert all(r.from_scheme == "E-7-4" for r in result.pathways)
