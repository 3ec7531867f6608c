"""
Production rules: sheets per size, margin band, packaging steps, input normalisation.
"""

import math

import pytest

from core import rates, rules


# ============================================================
# Sheets
# ============================================================

def test_seven_cm_fits_six_per_sheet():
    assert rules.stickers_per_sheet(7) == 6


def test_sheets_needed_rounds_up():
    assert rules.sheets_needed(51, 1) == 2
    assert rules.sheets_needed(100, 3) == 4


@pytest.mark.parametrize("size", range(1, 11))
def test_sheets_needed_at_least_one_for_positive_quantity(size):
    per = rates.STICKERS_PER_SHEET[size]
    for qty in (1, per, per + 1, 999):
        sheets = rules.sheets_needed(qty, size)
        assert sheets >= 1
        assert sheets == math.ceil(qty / per)


def test_sheets_needed_zero_quantity():
    assert rules.sheets_needed(0, 5) == 0


def test_unknown_size_has_no_capacity():
    assert rules.stickers_per_sheet(11) == 0
    assert rules.sheets_needed(100, 11) == 0


# ============================================================
# Margin band
# ============================================================

def test_margin_band_is_a_single_step():
    assert all(rules.margin_rate(s) == 0.46 for s in range(1, 8))
    assert all(rules.margin_rate(s) == 0.33 for s in range(8, 11))


# ============================================================
# Variable costs and packaging
# ============================================================

def test_variable_costs_for_ten_sheets():
    v = rules.variable_costs(10)
    assert v["total"] == pytest.approx(10 * 0.25 + 10 * 0.13 + 10 * 0.7)
    assert v["ink"] == pytest.approx(2.5)


@pytest.mark.parametrize("qty,expected", [
    (0, 0.0),
    (-5, 0.0),
    (1, 2.1),
    (100, 2.1),
    (101, 4.2),
    (200, 4.2),
    (201, 6.3),
])
def test_packaging_steps_per_hundred(qty, expected):
    assert rules.packaging_cost(qty) == pytest.approx(expected)


def test_fixed_costs_total():
    assert rules.fixed_costs_total() == pytest.approx(25.06)


# ============================================================
# Normalisation
# ============================================================

@pytest.mark.parametrize("raw,expected", [
    (5, 5), (0, 1), (-3, 1), (11, 10), (99, 10), (6.6, 7), ("4", 4), ("abc", 1), (None, 1),
])
def test_normalize_size(raw, expected):
    assert rules.normalize_size(raw) == expected


@pytest.mark.parametrize("raw,expected", [
    (100, 100), (-1, 0), (12.9, 12), ("30", 30), ("x", 0), (float("nan"), 0), (float("inf"), 0),
])
def test_normalize_quantity(raw, expected):
    assert rules.normalize_quantity(raw) == expected


@pytest.mark.parametrize("raw,expected", [
    (159, 159.0), (-10, 0.0), ("12.5", 12.5), (None, 0.0), (float("inf"), 0.0),
])
def test_normalize_amount(raw, expected):
    assert rules.normalize_amount(raw) == expected


def test_unknown_finish_costs_nothing_and_keeps_its_name():
    assert rules.cost_per_sheet("oro") == 0.0
    assert rules.finish_label("oro") == "oro"
    assert rules.finish_label("holo_clasico") == "Holo clásico"
