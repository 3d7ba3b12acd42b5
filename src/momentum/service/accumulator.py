# SPDX-License-Identifier: MIT

import math

WATER_MIN_ML = 0
WATER_MAX_ML = 3000


def clamp(value: float) -> float:
    return max(WATER_MIN_ML, min(WATER_MAX_ML, value))


def add(current: float, delta: float) -> float:
    return clamp(current + delta)


def round_half_up(value: float) -> int:
    """Nearest integer with halves rounded up, so 2.5 -> 3 and 12.5 -> 13."""
    return math.floor(value + 0.5)


def percent_of_goal(value: float) -> int:
    return min(100, round_half_up(value / WATER_MAX_ML * 100))
