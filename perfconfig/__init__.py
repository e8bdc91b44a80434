# PA-28 Performance Configuration Module
from .aircraft_config import (
    PerformanceConfig, config, AircraftModel,
    LoadingStations, AirframeLimits, FuelPolicy, RoundingPolicy
)

__all__ = [
    "PerformanceConfig", "config", "AircraftModel",
    "LoadingStations", "AirframeLimits", "FuelPolicy", "RoundingPolicy"
]
