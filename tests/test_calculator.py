"""
Single-quote calculator and multi-quote aggregator.

Reference figures come from the price list the shop quotes by hand:
100 x 1 cm white vinyl is $70, 45 x 7 cm classic holo is $168, etc.
"""

import math

import pytest

from core.calculator import (
    compute_benefit_split,
    compute_combined_total,
    compute_included_fee_total,
    compute_live_quote,
    compute_no_shipping_total,
    compute_remaining_shipping,
    compute_totals,
    included_fee_totals,
    operating_cost_without_shipping,
)


# ============================================================
# Totals and split
# ============================================================

def test_totals_on_round_base():
    t = compute_totals(100, 0.46, 0.16)
    assert t.profit == pytest.approx(46)
    assert t.subtotal == pytest.approx(146)
    assert t.iva == pytest.approx(23.36)
    assert t.total == pytest.approx(169.36)
    assert math.ceil(t.total) == 170


@pytest.mark.parametrize("base", [0, 1, 69.39, 123.456, 10_000])
def test_split_parts_add_up_to_base(base):
    split = compute_benefit_split(base)
    assert split.part_a + split.part_b == pytest.approx(base)
    assert split.part_a == pytest.approx(base * 0.55)


# ============================================================
# No-shipping total
# ============================================================

def test_no_shipping_small_white_vinyl():
    assert compute_no_shipping_total(100, 1, "vinil_blanco") == 70


def test_no_shipping_seven_cm_classic_holo():
    assert compute_no_shipping_total(45, 7, "holo_clasico") == 168


def test_totals_round_up_never_nearest():
    # 100 x 5 cm with the fee comes out at 276.05, nearest would give 276
    raw = included_fee_totals(100, 5, "vinil_blanco", 80).total
    assert raw - math.floor(raw) < 0.5
    assert compute_included_fee_total(100, 5, "vinil_blanco", 80) == math.floor(raw) + 1


def test_zero_quantity_still_pays_fixed_costs():
    base = operating_cost_without_shipping(0, 5, "vinil_blanco")
    assert base == pytest.approx(25.06)
    assert compute_no_shipping_total(0, 5, "vinil_blanco") == math.ceil(25.06 * 1.46 * 1.16)


def test_out_of_range_inputs_are_normalised():
    assert compute_no_shipping_total(100, 0, "vinil_blanco") == compute_no_shipping_total(100, 1, "vinil_blanco")
    assert compute_no_shipping_total(100, 42, "vinil_blanco") == compute_no_shipping_total(100, 10, "vinil_blanco")
    assert compute_no_shipping_total(-20, 5, "vinil_blanco") == compute_no_shipping_total(0, 5, "vinil_blanco")


def test_unknown_finish_only_drops_vinyl_cost():
    base = operating_cost_without_shipping(100, 1, "oro")
    assert base == pytest.approx(25.06 + 2 * 1.08 + 2.1)


# ============================================================
# Included-fee total
# ============================================================

def test_included_fee_five_cm():
    assert compute_included_fee_total(100, 5, "vinil_blanco", 80) == 277


def test_included_fee_seven_cm():
    assert compute_included_fee_total(100, 7, "vinil_blanco", 80) == 383


def test_included_fee_defaults_to_eighty():
    assert compute_included_fee_total(100, 5, "vinil_blanco") == 277


def test_negative_fee_counts_as_zero():
    assert compute_included_fee_total(100, 1, "vinil_blanco", -50) == compute_no_shipping_total(100, 1, "vinil_blanco")


# ============================================================
# Live quote
# ============================================================

def test_live_quote_breakdown():
    b = compute_live_quote(100, 5, "vinil_blanco", 159)
    assert b.stickers_per_sheet == 13
    assert b.sheets_needed == 8
    assert b.vinyl_cost == pytest.approx(47.2)
    assert b.fixed_total == pytest.approx(25.06)
    assert [c.key for c in b.fixed_costs] == ["caja_envio", "tapete_corte", "cinta_kraft", "guia_envio"]
    assert b.variable_costs.total == pytest.approx(8.64)
    assert b.packaging == pytest.approx(2.1)
    assert b.operating_cost == pytest.approx(83 + 159)
    assert b.margin_rate == 0.46
    assert b.total_rounded == math.ceil(b.total)
    assert b.price_per_sticker == pytest.approx(b.total_rounded / 100)
    assert b.split.base == pytest.approx(b.profit + b.iva)


def test_live_quote_differs_from_included_fee_total():
    live = compute_live_quote(100, 5, "vinil_blanco", 159).total_rounded
    assert live > compute_included_fee_total(100, 5, "vinil_blanco", 80)
    assert compute_live_quote(100, 5, "vinil_blanco", 80).total_rounded == 277


def test_live_quote_without_quantity():
    b = compute_live_quote(0, 5, "vinil_blanco", 0)
    assert b.sheets_needed == 0
    assert b.price_per_sticker == 0.0


def test_live_quote_negative_shipping_is_zero():
    b = compute_live_quote(100, 1, "vinil_blanco", -100)
    assert b.shipping == 0.0
    assert b.total_rounded == 70


# ============================================================
# Combined total
# ============================================================

def test_combined_without_fee_adds_full_shipping():
    assert compute_combined_total([70, 168], 159, 0) == 397


def test_combined_nets_fees_against_shipping():
    assert compute_combined_total([277, 383], 159, 80) == 660


def test_combined_single_quote_pays_remaining_shipping():
    assert compute_combined_total([277], 159, 80) == 356


def test_remaining_shipping_never_negative():
    assert compute_remaining_shipping(3, 159, 80) == 0.0
    assert compute_remaining_shipping(1, 159, 80) == pytest.approx(79)
    assert compute_remaining_shipping(0, -10, 80) == 0.0


def test_combined_empty_list_is_just_shipping():
    assert compute_combined_total([], 159, 80) == 159
    assert compute_combined_total([], 0, 80) == 0


def test_combined_accepts_generators():
    assert compute_combined_total((t for t in [277, 383]), 159) == 660


def test_negative_fee_does_not_raise_shipping():
    assert compute_remaining_shipping(1, 159, -80) == pytest.approx(159)
    assert compute_combined_total([277], 159, -80) == 277 + 159
