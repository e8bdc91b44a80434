"""
PA-28 Performance: Two-Stage Cruise-Row Lookup
==============================================

Each published altitude row carries its own set of ISA break-points for
RPM, and TAS only at the first and last ISA of that row. Lookup is done
within the two rows bracketing the altitude, then blended by altitude.

Within a row:
- RPM uses interp1 and CLAMPS at the row's ISA limits.
- TAS is linear between the row endpoints and EXTRAPOLATES past them.
Both behaviours follow the published tables.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple
import logging

from perfconfig import config
from .conversions import round_half_up, round_to_step
from .errors import ConstructionError, InterpolationError
from .interp import interp1, lerp

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class CruiseRow:
    """Published cruise figures at one pressure altitude."""
    pa: float                   # Pressure altitude (ft)
    isa: Tuple[float, ...]      # ISA break-points for which RPM is published
    rpm: Tuple[float, ...]      # Same length as isa
    tas_lo: float               # TAS at isa[0]
    tas_hi: float               # TAS at isa[-1] (== tas_lo for a single-point row)

    def __post_init__(self):
        isa = tuple(float(v) for v in self.isa)
        rpm = tuple(float(v) for v in self.rpm)
        if not isa:
            raise ConstructionError(f"cruise row at {self.pa} ft has no ISA break-points")
        if len(isa) != len(rpm):
            raise ConstructionError(
                f"cruise row at {self.pa} ft: {len(isa)} ISA values but {len(rpm)} RPM values"
            )
        if any(b <= a for a, b in zip(isa, isa[1:])):
            raise ConstructionError(f"cruise row at {self.pa} ft: ISA must be strictly increasing")
        object.__setattr__(self, "isa", isa)
        object.__setattr__(self, "rpm", rpm)

    @property
    def isa_lo(self) -> float:
        return self.isa[0]

    @property
    def isa_hi(self) -> float:
        return self.isa[-1]


@dataclass(frozen=True)
class CruiseResult:
    """Rounded cruise setting for display."""
    rpm: int
    tas: int


class CruiseTable:
    """Immutable, altitude-ordered sequence of CruiseRow."""

    def __init__(self, rows: Sequence[CruiseRow]):
        frozen = tuple(rows)
        if not frozen:
            raise ConstructionError("cruise table needs at least one row")
        altitudes = [row.pa for row in frozen]
        if any(b <= a for a, b in zip(altitudes, altitudes[1:])):
            raise ConstructionError("cruise rows must be strictly increasing in altitude")
        self._rows = frozen
        logger.debug("Cruise table built: %d rows, %g-%g ft",
                     len(frozen), altitudes[0], altitudes[-1])

    @property
    def rows(self) -> Tuple[CruiseRow, ...]:
        return self._rows

    def __iter__(self) -> Iterator[CruiseRow]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> CruiseRow:
        return self._rows[index]


def interpolate_in_row(row: CruiseRow, isa_dev_c: float) -> Tuple[float, float]:
    """
    Unrounded (rpm, tas) for one altitude row.

    RPM is clamped to the row's published ISA range; TAS is not.
    """
    rpm = interp1(row.isa, row.rpm, isa_dev_c)

    if row.isa_lo == row.isa_hi:
        tas = row.tas_lo
    else:
        t = (isa_dev_c - row.isa_lo) / (row.isa_hi - row.isa_lo)
        tas = row.tas_lo + t * (row.tas_hi - row.tas_lo)
    return rpm, tas


def _rounded(rpm: float, tas: float) -> CruiseResult:
    return CruiseResult(
        rpm=round_to_step(rpm, config.rounding.rpm_step),
        tas=round_half_up(tas),
    )


def cruise_lookup(
    pressure_altitude_ft: float,
    isa_dev_c: float,
    rows: Sequence[CruiseRow],
) -> CruiseResult:
    """
    Cruise RPM and TAS at a pressure altitude and ISA deviation.

    Args:
        pressure_altitude_ft: Pressure altitude in feet
        isa_dev_c: ISA deviation in degrees C
        rows: Rows sorted ascending by altitude

    Returns:
        CruiseResult with RPM rounded to the configured step and TAS to
        the nearest knot. Altitudes outside the table use the nearest row.
    """
    if pressure_altitude_ft <= rows[0].pa:
        return _rounded(*interpolate_in_row(rows[0], isa_dev_c))
    if pressure_altitude_ft >= rows[-1].pa:
        return _rounded(*interpolate_in_row(rows[-1], isa_dev_c))

    for i in range(len(rows) - 1):
        if rows[i].pa <= pressure_altitude_ft <= rows[i + 1].pa:
            low, high = rows[i], rows[i + 1]
            break
    else:
        raise InterpolationError(
            f"cruise_lookup: altitude {pressure_altitude_ft!r} not bracketed"
        )

    rpm_lo, tas_lo = interpolate_in_row(low, isa_dev_c)
    rpm_hi, tas_hi = interpolate_in_row(high, isa_dev_c)

    w = (pressure_altitude_ft - low.pa) / (high.pa - low.pa)
    return _rounded(lerp(rpm_lo, rpm_hi, w), lerp(tas_lo, tas_hi, w))
