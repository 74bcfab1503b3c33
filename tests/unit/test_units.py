import math

import pytest

from fitflash.utils.units import (
    COMMON_LBS_WEIGHTS,
    UnitSystem,
    calculate_volume,
    convert_from_storage_unit,
    convert_to_storage_unit,
    convert_weight_for_display,
    convert_weight_from_display,
    display_volume,
    display_weight,
    format_weight,
    get_weight_unit_label,
    is_metric,
    kg_to_lbs,
    lbs_to_kg,
    round_to,
    snap_to_common_weight,
)


def test_common_weights_ascending_without_duplicates():
    assert list(COMMON_LBS_WEIGHTS) == sorted(set(COMMON_LBS_WEIGHTS))
    assert COMMON_LBS_WEIGHTS[0] == 2.5
    assert COMMON_LBS_WEIGHTS[-1] == 1000


@pytest.mark.parametrize(
    "value,decimals,expected",
    [
        (1.005, 2, 1.01),
        (-1.005, 2, -1.01),
        (2.5, 0, 3),
        (-2.5, 0, -3),
        (0.125, 2, 0.13),
        (1.2345, 3, 1.235),
        (61.23496, 4, 61.235),
        (10, 2, 10),
    ],
)
def test_round_to_halves_away_from_zero(value, decimals, expected):
    assert round_to(value, decimals) == expected


@pytest.mark.parametrize("x", [0.0, 1.005, -3.14159, 2204.622621, 1e-7, 123456789.987654])
def test_round_to_is_idempotent(x):
    once = round_to(x, 2)
    assert round_to(once, 2) == once


def test_round_to_passes_through_non_finite():
    assert math.isnan(round_to(math.nan, 2))
    assert round_to(math.inf, 2) == math.inf


def test_snap_to_table_entry():
    assert snap_to_common_weight(135.3) == 135
    assert snap_to_common_weight(224.6) == 225


def test_snap_to_two_and_a_half_increment():
    # 137.5 is not in the table but is a 2.5 lb step
    assert snap_to_common_weight(137.3) == 137.5
    assert snap_to_common_weight(102.4) == 102.5


def test_snap_falls_back_to_one_decimal():
    assert snap_to_common_weight(101.14) == 101.1
    assert snap_to_common_weight(301.8) == 301.8


def test_snap_first_match_wins_over_closest():
    # 10 is within tolerance first even though 15 is closer
    assert snap_to_common_weight(13, tolerance=3) == 10


@pytest.mark.parametrize("lbs", [45, 135, 225, 315, 405])
def test_lbs_round_trip_through_storage(lbs):
    assert kg_to_lbs(lbs_to_kg(lbs)) == lbs


def test_lbs_to_kg_uses_storage_precision():
    assert lbs_to_kg(135) == 61.235
    assert lbs_to_kg(100) == 45.3592


def test_kg_to_lbs_without_snap_rounds_to_two_decimals():
    assert kg_to_lbs(1000, snap=False) == 2204.62
    assert kg_to_lbs(61.235, snap=False) == 135.0


def test_format_weight():
    assert format_weight(100, True) == "100.0 kg"
    assert format_weight(61.235, False) == "135.0 lbs"
    assert format_weight(61.26, True) == "61.3 kg"


def test_convert_to_storage_unit():
    assert convert_to_storage_unit(100, True) == 100
    assert convert_to_storage_unit(135, False) == 61.235
    assert convert_to_storage_unit("135", False) == 61.235


@pytest.mark.parametrize("blank", [0, None, "", math.nan, "1_000", "inf", "nan"])
@pytest.mark.parametrize("metric", [True, False])
def test_storage_conversions_short_circuit_blank_input(blank, metric):
    assert convert_to_storage_unit(blank, metric) == 0
    assert convert_from_storage_unit(blank, metric) == 0


def test_convert_from_storage_unit():
    assert convert_from_storage_unit(61.235, True) == 61.235
    assert convert_from_storage_unit(61.235, False) == 135


def test_calculate_volume_metric():
    assert calculate_volume(100, 10, True) == 1000


def test_calculate_volume_imperial_is_not_snapped():
    volume = calculate_volume(100, 10, False)
    assert volume == kg_to_lbs(1000, snap=False)
    assert volume == 2204.62
    assert volume != kg_to_lbs(1000)


def test_display_weight():
    assert display_weight(100, True) == "100 kg"
    assert display_weight(61.235, False) == "135 lbs"
    assert display_weight(61.235, False, include_unit=False) == "135"
    assert display_weight(61.26, True) == "61.3 kg"
    assert display_weight(61.2345, True, precision=2) == "61.23 kg"
    assert display_weight("80", True) == "80 kg"


@pytest.mark.parametrize("empty", [0, math.nan, "abc", None, "1_000", "inf", "nan"])
def test_display_weight_placeholder(empty):
    assert display_weight(empty, True) == "-"
    assert display_weight(empty, False) == "-"


def test_display_volume_large_values_use_separators():
    assert display_volume(1500, True) == "1,500 kg"
    assert display_volume(1000, False) == "2,205 lbs"
    assert display_volume(12345.6, True) == "12,346 kg"


def test_display_volume_small_values_keep_one_decimal():
    assert display_volume(100, False) == "220.5 lbs"
    assert display_volume(612.35, True) == "612.4 kg"
    assert display_volume(500, True) == "500 kg"


def test_display_volume_already_converted():
    assert display_volume(2204.62, False, is_already_converted=True) == "2,205 lbs"
    assert display_volume(220.46, False, is_already_converted=True) == "220.5 lbs"


def test_display_volume_placeholder():
    assert display_volume(0, True) == "-"
    assert display_volume("not a number", False) == "-"


def test_unit_labels_and_systems():
    assert get_weight_unit_label(True) == "kg"
    assert get_weight_unit_label(False) == "lbs"
    assert is_metric(UnitSystem.METRIC)
    assert is_metric("metric")
    assert not is_metric(UnitSystem.IMPERIAL)
    assert not is_metric(None)


def test_unit_system_wrappers():
    assert convert_weight_for_display(61.235, "imperial") == 135
    assert convert_weight_for_display(61.235, UnitSystem.METRIC) == 61.235
    assert convert_weight_from_display(135, UnitSystem.IMPERIAL) == 61.235
    assert convert_weight_from_display(60, "metric") == 60


@pytest.mark.parametrize(
    "text,expected",
    [(" 80 ", "80 kg"), ("-2.5", "-2.5 kg"), (".5", "0.5 kg"), ("1e2", "100 kg")],
)
def test_display_weight_numeric_strings(text, expected):
    assert display_weight(text, True) == expected


def test_storage_conversion_accepts_infinity_spelling():
    assert convert_to_storage_unit("Infinity", True) == math.inf


def test_small_weights_render_without_exponent():
    assert display_weight(0.00005, True, precision=5) == "0.00005 kg"


def test_infinite_values_render_as_infinity():
    assert display_volume(math.inf, True) == "Infinity kg"
    assert display_weight(-math.inf, True) == "-Infinity kg"
