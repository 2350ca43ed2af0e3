"""
Random practice numbers for Suji.

Draws a uniform integer and snaps it to a "realistic" value: the larger the
number, the coarser the rounding, so that 38,500 or 4,200,000 come up
rather than 38,517 or 4,213,977.
"""

import bisect
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from suji import settings
from suji.numbers import NumeralTriple, convert
from suji.settings import MAX_VALUE, MIN_VALUE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MagnitudeBand:
    """Values in [lower, upper) are rounded to a multiple of ``granularity``."""
    lower: int
    upper: Optional[int]
    granularity: int

    def __contains__(self, value: int) -> bool:
        return value >= self.lower and (self.upper is None or value < self.upper)


MAGNITUDE_BANDS: Tuple[MagnitudeBand, ...] = (
    MagnitudeBand(0, 10 ** 3, 1),
    MagnitudeBand(10 ** 3, 10 ** 4, 100),
    MagnitudeBand(10 ** 4, 10 ** 5, 500),
    MagnitudeBand(10 ** 5, 10 ** 6, 1_000),
    MagnitudeBand(10 ** 6, 10 ** 7, 10_000),
    MagnitudeBand(10 ** 7, 10 ** 8, 50_000),
    MagnitudeBand(10 ** 8, 10 ** 9, 100_000),
    MagnitudeBand(10 ** 9, 10 ** 10, 1_000_000),
    MagnitudeBand(10 ** 10, 10 ** 11, 5_000_000),
    MagnitudeBand(10 ** 11, 10 ** 12, 10_000_000),
    MagnitudeBand(10 ** 12, None, 100_000_000),
)

_BAND_LOWER_BOUNDS = [band.lower for band in MAGNITUDE_BANDS]

# Module-level generator, reproducible when SUJI_RANDOM_SEED is set
_RNG = random.Random(settings.RANDOM_SEED)


def _clamp(value: int) -> int:
    return max(MIN_VALUE, min(MAX_VALUE, value))


def band_for(value: int) -> MagnitudeBand:
    """Find the magnitude band containing ``value`` (clamped into the domain)."""
    index = bisect.bisect_right(_BAND_LOWER_BOUNDS, _clamp(value)) - 1
    return MAGNITUDE_BANDS[index]


def granularity_for(value: int) -> int:
    """
    Rounding granularity applied to a number of this magnitude.

    Example:
        >>> granularity_for(38_517)
        500
    """
    return band_for(value).granularity


def round_to_realistic(value: int) -> int:
    """
    Round a number to a realistic value for its magnitude.

    Rounds half up to the nearest multiple of the band granularity. The
    result never leaves [0, 999,999,999,999,999]; at the top edge it steps
    down to the largest multiple that still fits.

    Example:
        >>> round_to_realistic(1234)
        1200
        >>> round_to_realistic(38_750)
        39000
        >>> round_to_realistic(999)
        999
    """
    value = _clamp(value)
    granularity = granularity_for(value)

    rounded = (value + granularity // 2) // granularity * granularity
    if rounded > MAX_VALUE:
        rounded = MAX_VALUE - MAX_VALUE % granularity
    return rounded


def sample(minimum: int = MIN_VALUE, maximum: int = MAX_VALUE,
           rng: Optional[random.Random] = None) -> int:
    """
    Draw a realistic random number between ``minimum`` and ``maximum``.

    The raw draw is uniform over the inclusive range; it is then passed
    through :func:`round_to_realistic`, so the result can land slightly
    outside the requested range but never outside the numeral domain.

    Args:
        minimum: Lower bound, inclusive.
        maximum: Upper bound, inclusive.
        rng: Random generator; defaults to the module generator.

    Returns:
        A number that :func:`suji.numbers.convert` always accepts.
    """
    lo, hi = _clamp(minimum), _clamp(maximum)
    if (lo, hi) != (minimum, maximum):
        logger.warning(f"Sample bounds {minimum}..{maximum} clamped to {lo}..{hi}")
    if lo > hi:
        logger.warning(f"Sample bounds reversed ({lo} > {hi}), swapping")
        lo, hi = hi, lo

    raw = (rng or _RNG).randint(lo, hi)
    return round_to_realistic(raw)


def random_number(rng: Optional[random.Random] = None) -> int:
    """Draw a realistic random number from the whole numeral domain."""
    return sample(rng=rng)


def sample_triple(minimum: int = MIN_VALUE, maximum: int = MAX_VALUE,
                  rng: Optional[random.Random] = None) -> NumeralTriple:
    """Draw a realistic random number and convert it, ready to ask."""
    return convert(sample(minimum, maximum, rng=rng))
