# visadesk/engine/reference.py
"""
Reference constants: per-year economic benchmarks used to normalise
income-based rules. All money figures are annual amounts in 만원.

Schedules are data, not code. Evaluators only ever receive a
`ReferenceConstants` value, so adding a policy year means adding one
entry to REFERENCE_SCHEDULES.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .errors import ConfigurationError


@dataclass(frozen=True)
class ReferenceConstants:
    policy_year: int
    label: str
    gni_per_capita: int
    min_annual_wage: int
    # household size -> annual median household income
    median_household_income: Mapping[int, int]

    def __post_init__(self) -> None:
        sizes = sorted(self.median_household_income)
        # extrapolation reads the step between the two largest sizes
        if len(sizes) < 2 or sizes != list(range(1, len(sizes) + 1)):
            raise ConfigurationError(
                f"median income table for {self.policy_year} must cover household sizes 1..n with n >= 2, "
                f"got {sizes}",
                field="medianHouseholdIncome",
            )

    def median_income(self, household_size: int) -> int:
        if household_size < 1:
            raise ConfigurationError(
                f"household size must be at least 1, got {household_size}",
                field="householdSize",
            )
        table = self.median_household_income
        if household_size in table:
            return table[household_size]

        # Beyond the published sizes, each extra member adds the last increment
        largest = max(table)
        step = table[largest] - table[largest - 1]
        return table[largest] + step * (household_size - largest)


def _schedule(year: int, gni: int, min_wage: int, medians: list[int]) -> ReferenceConstants:
    return ReferenceConstants(
        policy_year=year,
        label=f"{year} schedule",
        gni_per_capita=gni,
        min_annual_wage=min_wage,
        median_household_income=MappingProxyType(
            {size: amount for size, amount in enumerate(medians, start=1)}
        ),
    )


REFERENCE_SCHEDULES: Mapping[int, ReferenceConstants] = MappingProxyType({
    2024: _schedule(2024, 4250, 2473, [2674, 4419, 5658, 6876, 8035, 9142]),
    2025: _schedule(2025, 4405, 2516, [2870, 4719, 6030, 7317, 8530, 9678]),
    2026: _schedule(2026, 4995, 2588, [3077, 5039, 6431, 7794, 9068, 10267]),
})


def get_reference_constants(year: int) -> ReferenceConstants:
    constants = REFERENCE_SCHEDULES.get(year)
    if constants is None:
        available = ", ".join(str(y) for y in sorted(REFERENCE_SCHEDULES))
        raise ConfigurationError(
            f"no reference constants for policy year {year} (available: {available})",
            field="policyYear",
        )
    return constants
