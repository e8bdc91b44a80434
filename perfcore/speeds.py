"""
PA-28 Performance: Reference Speeds
===================================

Rotation, approach and obstacle speeds against weight, plus maneuvering
speed reduced for weight below MTOW.

Warrior III speeds extend the published trend beyond the table; Arrow III
speeds hold the nearest published value.
"""

from dataclasses import dataclass
from typing import Optional
import math

from perfconfig import config, AircraftModel
from .aircraft import arrow3, warrior3
from .conversions import round_half_up
from .interp import interp1, scale_linear


@dataclass(frozen=True)
class SpeedCard:
    """Reference speeds (KIAS) at take-off and landing weight."""
    va_takeoff: int
    va_landing: int
    vr_takeoff: int
    vr_landing: int
    vref_takeoff: int
    vref_landing: int
    vr_flaps25_takeoff: Optional[int] = None    # Arrow III only
    vr_flaps25_landing: Optional[int] = None
    vtoss_takeoff: Optional[int] = None         # Warrior III only
    vtoss_landing: Optional[int] = None


def warrior3_vr(weight_lbs: float) -> int:
    return round_half_up(scale_linear(warrior3.SPEED_WEIGHTS, warrior3.VR_KT, weight_lbs))


def warrior3_vref(weight_lbs: float) -> int:
    return round_half_up(scale_linear(warrior3.SPEED_WEIGHTS, warrior3.VREF_KT, weight_lbs))


def warrior3_vtoss(weight_lbs: float) -> int:
    return round_half_up(scale_linear(warrior3.SPEED_WEIGHTS, warrior3.VTOSS_KT, weight_lbs))


def arrow3_vr_flaps0(weight_lbs: float) -> int:
    return round_half_up(interp1(arrow3.SPEED_WEIGHTS, arrow3.VR_FLAPS0_KT, weight_lbs))


def arrow3_vr_flaps25(weight_lbs: float) -> int:
    return round_half_up(interp1(arrow3.SPEED_WEIGHTS, arrow3.VR_FLAPS25_KT, weight_lbs))


def arrow3_vref(weight_lbs: float) -> int:
    return round_half_up(interp1(arrow3.SPEED_WEIGHTS, arrow3.VREF_KT, weight_lbs))


def maneuvering_speed(weight_lbs: float, mtow_lbs: float, va_kt: float) -> int:
    """Va scaled by sqrt(W / MTOW), rounded up to the next knot."""
    return math.ceil(math.sqrt(weight_lbs / mtow_lbs) * va_kt)


def speed_card(
    model: AircraftModel,
    takeoff_weight_lbs: float,
    landing_weight_lbs: float,
) -> SpeedCard:
    """
    Build the speed card for an aircraft at its take-off and landing weights.

    Args:
        model: Aircraft type
        takeoff_weight_lbs: Take-off weight
        landing_weight_lbs: Landing weight

    Returns:
        SpeedCard with the type-specific speeds filled in
    """
    limits = config.limits[model]
    va_to = maneuvering_speed(takeoff_weight_lbs, limits.mtow_lbs, limits.va_kt)
    va_ldg = maneuvering_speed(landing_weight_lbs, limits.mtow_lbs, limits.va_kt)

    if model == AircraftModel.WARRIOR_III:
        return SpeedCard(
            va_takeoff=va_to,
            va_landing=va_ldg,
            vr_takeoff=warrior3_vr(takeoff_weight_lbs),
            vr_landing=warrior3_vr(landing_weight_lbs),
            vref_takeoff=warrior3_vref(takeoff_weight_lbs),
            vref_landing=warrior3_vref(landing_weight_lbs),
            vtoss_takeoff=warrior3_vtoss(takeoff_weight_lbs),
            vtoss_landing=warrior3_vtoss(landing_weight_lbs),
        )

    return SpeedCard(
        va_takeoff=va_to,
        va_landing=va_ldg,
        vr_takeoff=arrow3_vr_flaps0(takeoff_weight_lbs),
        vr_landing=arrow3_vr_flaps0(landing_weight_lbs),
        vref_takeoff=arrow3_vref(takeoff_weight_lbs),
        vref_landing=arrow3_vref(landing_weight_lbs),
        vr_flaps25_takeoff=arrow3_vr_flaps25(takeoff_weight_lbs),
        vr_flaps25_landing=arrow3_vr_flaps25(landing_weight_lbs),
    )
