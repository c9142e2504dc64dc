# visadesk/engine/scoring.py
"""
Step-function helpers shared by every point-based scheme.

A bracket table is ((lower_bound, score), ...) sorted by lower bound;
a level map is {level: score} ordered from lowest to highest score.
Both are policy data from scheme_config; nothing here knows a scheme.
"""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Sequence, Tuple

Bracket = Tuple[float, int]


def apply_brackets(value: float, table: Sequence[Bracket]) -> int:
    """Score of the highest bracket whose lower bound is <= value (0 below the table)."""
    score = 0
    for lower, points in table:
        if value >= lower:
            score = points
        else:
            break
    return score


def next_bracket(value: float, table: Sequence[Bracket]) -> Optional[Bracket]:
    """First bracket above `value` that scores more than the current one."""
    current = apply_brackets(value, table)
    for lower, points in table:
        if lower > value and points > current:
            return lower, points
    return None


def level_score(level: Any, levels: Mapping[Any, int]) -> int:
    return levels.get(level, 0)


def next_level(level: Any, levels: Mapping[Any, int]) -> Optional[Tuple[Any, int]]:
    current = level_score(level, levels)
    for candidate, points in levels.items():
        if points > current:
            return candidate, points
    return None


def ratio(amount: float, benchmark: float) -> float:
    # rounded so that published boundaries (e.g. 1.2x) compare exactly
    if benchmark <= 0:
        return 0.0
    return round(amount / benchmark, 6)


def scaled_threshold(lower: float, benchmark: float) -> int:
    """Absolute amount needed to reach a ratio bracket, rounded up."""
    return int(math.ceil(round(lower * benchmark, 6)))


def percent(met: int, total: int) -> int:
    """Whole-number percentage, halves rounded up."""
    if total <= 0:
        return 0
    return int(math.floor(100 * met / total + 0.5))
