"""Quick runtime checks for the sticker quote core.
Run: python scripts/quickcheck.py
Exits with code 0 on success, non-zero on failure.
"""
from core.calculator import (
    compute_combined_total,
    compute_included_fee_total,
    compute_no_shipping_total,
    compute_totals,
)


def approx(a, b, tol=1e-9):
    return abs(a - b) <= tol


def main():
    t = compute_totals(100, 0.46)
    assert approx(t.profit, 46.0)
    assert approx(t.iva, 23.36)
    assert approx(t.total, 169.36)

    q1 = compute_no_shipping_total(100, 1, "vinil_blanco")
    q2 = compute_no_shipping_total(45, 7, "holo_clasico")
    assert q1 == 70, q1
    assert q2 == 168, q2
    assert compute_combined_total([q1, q2], 159, 0) == 397

    a = compute_included_fee_total(100, 5, "vinil_blanco", 80)
    b = compute_included_fee_total(100, 7, "vinil_blanco", 80)
    assert a == 277, a
    assert b == 383, b
    assert compute_combined_total([a, b], 159, 80) == 660
    assert compute_combined_total([a], 159, 80) == 356

    print("Quickcheck OK")


if __name__ == '__main__':
    main()
