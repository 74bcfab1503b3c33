import logging
import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

from fitflash.config import SNAP_TOLERANCE_LBS

logger = logging.getLogger(__name__)


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


# Weights are stored in kg; this is the only ratio used for conversion
KG_TO_LBS = 2.20462262185

# Plate and dumbbell increments users actually load, ascending.
# Used to recover the typed lbs value after a kg round-trip.
COMMON_LBS_WEIGHTS = (
    2.5,
    *range(5, 301, 5),
    315, 335, 350, 365, 385, 400, 405, 425, 450, 475, 495, 500, 515, 545,
    585, 600, 635, 675, 700, 725, 765, 800, 855, 900, 945, 1000,
)

# Strings accepted as numbers: "12", "-2.5", ".5", "1e3", "Infinity"
NUMERIC_STRING = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_number(value) -> float:
    """Coerce form/database input to a float, NaN when it isn't numeric."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
        # float() also takes "1_000", "inf" and "nan"; form input may not
        if not NUMERIC_STRING.fullmatch(value):
            return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _is_blank(value) -> bool:
    return not value or math.isnan(_to_number(value))


def _format_number(value: float) -> str:
    # 135.0 renders as "135", 61.2 as "61.2", 5e-05 as "0.00005"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def round_to(value: float, decimals: int) -> float:
    """
    Round to a number of decimal places, halves away from zero.

    Rounding is done on the shortest decimal representation of the float,
    so round_to(1.005, 2) gives 1.01 rather than the 1.0 binary floating
    point would suggest.

    Args:
        value: Number to round
        decimals: Number of decimal places (>= 0)

    Returns:
        Rounded number
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    context = Context(prec=max(28, exact.adjusted() + decimals + 2))
    rounded = exact.quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=context
    )
    return float(rounded)


def snap_to_common_weight(lbs: float, tolerance: float = SNAP_TOLERANCE_LBS) -> float:
    """
    Snap a weight to a common lbs value if within tolerance.

    The first table entry within tolerance wins, scanning upward. Failing
    that, the nearest 2.5 lb increment is used if close enough, otherwise
    the weight is rounded to one decimal.

    Args:
        lbs: Weight in pounds
        tolerance: How close (in lbs) to snap

    Returns:
        Snapped weight, or the weight rounded to 1 decimal if nothing matched
    """
    if not math.isfinite(lbs):
        return lbs
    for common in COMMON_LBS_WEIGHTS:
        if abs(lbs - common) <= tolerance:
            return float(common)

    nearest = math.floor(lbs / 2.5 + 0.5) * 2.5
    if abs(lbs - nearest) <= tolerance:
        return float(nearest)

    logger.debug(f"No common weight within {tolerance} lbs of {lbs}")
    return round_to(lbs, 1)


def kg_to_lbs(kg: float, snap: bool = True) -> float:
    """Convert kilograms to pounds, snapped to gym increments unless snap is False."""
    raw_lbs = kg * KG_TO_LBS
    return snap_to_common_weight(raw_lbs) if snap else round_to(raw_lbs, 2)


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms at storage precision (4 decimals)."""
    return round_to(lbs / KG_TO_LBS, 4)


def get_weight_unit_label(use_metric: bool) -> str:
    """Get the weight unit label for display."""
    return "kg" if use_metric else "lbs"


def is_metric(unit_system) -> bool:
    """True when a user's unit preference is metric."""
    return unit_system == UnitSystem.METRIC or unit_system == "metric"


def format_weight(weight: float, use_metric: bool) -> str:
    """Format a stored (kg) weight with one decimal and its unit."""
    if use_metric:
        return f"{round_to(weight, 1):.1f} kg"
    return f"{round_to(kg_to_lbs(weight), 1):.1f} lbs"


def convert_to_storage_unit(weight, is_in_metric: bool) -> float:
    """
    Convert input weight to storage format (kg).

    Args:
        weight: Weight from user input, number or numeric string
        is_in_metric: Whether the input is in kg

    Returns:
        Weight in kilograms, 0 for empty input
    """
    if _is_blank(weight):
        return 0.0
    number = _to_number(weight)
    return number if is_in_metric else lbs_to_kg(number)


def convert_from_storage_unit(weight, is_in_metric: bool) -> float:
    """
    Convert a stored (kg) weight to the display unit.

    Args:
        weight: Weight from the database, in kg
        is_in_metric: Whether to display in kg

    Returns:
        Weight in display units, 0 for empty input
    """
    if _is_blank(weight):
        return 0.0
    number = _to_number(weight)
    return number if is_in_metric else kg_to_lbs(number)


def convert_weight_for_display(weight_kg: float, unit_system) -> float:
    """Convert weight from kg (database format) to user's preferred units."""
    return convert_from_storage_unit(weight_kg, is_metric(unit_system))


def convert_weight_from_display(weight_value: float, unit_system) -> float:
    """Convert weight from user's preferred units to kg (database format)."""
    return convert_to_storage_unit(weight_value, is_metric(unit_system))


def calculate_volume(weight, reps, use_metric: bool) -> float:
    """
    Calculate set volume (weight x reps) in the requested unit.

    Volume is computed in kg first and converted without snapping, since
    an aggregate is not a plate weight.
    """
    volume_kg = _to_number(weight) * _to_number(reps)
    return volume_kg if use_metric else kg_to_lbs(volume_kg, snap=False)


def display_weight(
    weight, use_metric: bool, include_unit: bool = True, precision: int = 1
) -> str:
    """
    Display a stored (kg) weight with proper units and formatting.

    Args:
        weight: Weight value from database (in kg)
        use_metric: Whether to display in metric or imperial
        include_unit: Whether to append the unit label
        precision: Number of decimal places

    Returns:
        Formatted weight string, "-" when there is no weight
    """
    number = _to_number(weight)
    if math.isnan(number) or number == 0:
        return "-"

    converted = number if use_metric else kg_to_lbs(number)
    formatted = _format_number(round_to(converted, precision))

    if not include_unit:
        return formatted
    return f"{formatted} {get_weight_unit_label(use_metric)}"


def display_volume(volume, use_metric: bool, is_already_converted: bool = False) -> str:
    """
    Format a volume total for display, e.g. in charts.

    Args:
        volume: Volume in kg, or in display units if is_already_converted
        use_metric: Whether to display in metric or imperial
        is_already_converted: Whether the volume is already in display units

    Returns:
        Formatted volume string, "-" when there is no volume
    """
    number = _to_number(volume)
    if math.isnan(number) or number == 0:
        return "-"

    if is_already_converted or use_metric:
        converted = number
    else:
        converted = kg_to_lbs(number, snap=False)

    unit = get_weight_unit_label(use_metric)
    # Large totals are shown as whole numbers with thousands separators
    if math.isfinite(converted) and converted >= 1000:
        return f"{math.floor(converted + 0.5):,} {unit}"
    return f"{_format_number(round_to(converted, 1))} {unit}"
