"""
PA-28 Performance: Standard Atmosphere Helpers
==============================================

ISA temperature at altitude and density altitude from pressure altitude and
ISA deviation (troposphere model, below 36,089 ft).
"""

from .conversions import round_half_up

T0_K = 288.15                   # ISA sea-level temperature (K)
LAPSE_K_PER_FT = 0.0019812      # 6.5 K/km
LAPSE_K_PER_M = 0.0065
G_M_OVER_R = 0.034163           # g*M/R for dry air (K/m)
BAROMETRIC_EXPONENT = G_M_OVER_R / LAPSE_K_PER_M   # ~5.2559


def isa_temperature_c(pressure_altitude_hundreds: float) -> float:
    """ISA temperature using the cockpit rule of 2 C per 1000 ft."""
    return 15 - pressure_altitude_hundreds / 5


def temp_from_isa(pressure_altitude_hundreds: float, isa_deviation: float) -> float:
    """Outside air temperature (C) for an ISA deviation at altitude."""
    return isa_temperature_c(pressure_altitude_hundreds) + isa_deviation


def isa_deviation_from_oat(pressure_altitude_hundreds: float, oat_c: float) -> float:
    """ISA deviation (C) for an observed outside air temperature."""
    return oat_c - isa_temperature_c(pressure_altitude_hundreds)


def density_altitude_isa(pressure_altitude_ft: float, isa_dev_c: float) -> int:
    """
    Density altitude in feet.

    Args:
        pressure_altitude_ft: Pressure altitude in feet
        isa_dev_c: Deviation from ISA temperature in degrees C

    Returns:
        Density altitude rounded to the nearest foot. Equals the pressure
        altitude at ISA.
    """
    # Static pressure ratio that defines this pressure altitude
    theta = 1 - (LAPSE_K_PER_FT * pressure_altitude_ft) / T0_K
    pressure_ratio = theta ** BAROMETRIC_EXPONENT

    t_isa_k = T0_K - LAPSE_K_PER_FT * pressure_altitude_ft
    t_actual_k = t_isa_k + isa_dev_c

    # sigma = rho / rho0
    sigma = pressure_ratio * T0_K / t_actual_k

    theta_rho = sigma ** (1 / (BAROMETRIC_EXPONENT - 1))
    return round_half_up((T0_K / LAPSE_K_PER_FT) * (1 - theta_rho))
