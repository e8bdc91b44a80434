"""Rounding and unit conversions shared by the calculators."""

import math

from perfconfig import config


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity.

    Python's round() is banker's rounding; POH figures are read with ties
    rounded up (61.5 -> 62, -2.5 -> -2).
    """
    return int(math.floor(value + 0.5))


def round_to_step(value: float, step: int) -> int:
    """Round to the nearest multiple of step (ties up)."""
    return round_half_up(value / step) * step


def round_one_dec(value: float) -> float:
    """Round to one decimal place (ties up)."""
    return round_half_up(value * 10) / 10


def lbs_to_kg(lbs: float) -> int:
    return round_half_up(lbs / 2.2046)


def gal_to_litres(gal: float) -> float:
    """US gallons to litres at the factor the POH climb figures use."""
    return gal * config.fuel.litres_per_gal


def fuel_litres_to_lbs(litres: float) -> float:
    """Avgas mass for a volume, unrounded."""
    return litres * config.fuel.fuel_lbs_per_litre
