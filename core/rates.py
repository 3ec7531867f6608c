# core/rates.py
# Static rate tables (MXN). Nothing here changes at runtime.

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

MIN_SIZE_CM = 1
MAX_SIZE_CM = 10

# stickers per sheet by size (cm)
STICKERS_PER_SHEET = MappingProxyType({
    1: 50,
    2: 50,
    3: 30,
    4: 18,
    5: 13,
    6: 7,
    7: 6,
    8: 5,
    9: 2,
    10: 2,
})

FINISH_LABELS = MappingProxyType({
    "vinil_blanco": "Vinil blanco",
    "holo_clasico": "Holo clásico",
    "holo_puntos": "Holo puntos",
    "holo_arena": "Holo arena",
    "vinil_blanco_laminado": "Vinil blanco laminado",
})

COST_PER_SHEET = MappingProxyType({
    "vinil_blanco": 5.9,
    "holo_clasico": 7.9,
    "holo_puntos": 7.9,
    "holo_arena": 10.0,
    "vinil_blanco_laminado": 17.0,
})


class FixedCost(NamedTuple):
    key: str
    label: str
    amount: float


# order matters: summed left to right
FIXED_COSTS: tuple[FixedCost, ...] = (
    FixedCost("caja_envio", "Caja de envío", 20.0),
    FixedCost("tapete_corte", "Tapete de corte", 0.76),
    FixedCost("cinta_kraft", "Cinta kraft", 4.0),
    FixedCost("guia_envio", "Guía de envío", 0.3),
)

# per sheet
INK_RATE = 0.25
CUTTING_RATE = 0.13
TAPE_RATE = 0.7

# plastic wrap, per started block of 100 stickers
PACKAGING_UNIT_COST = 2.1
PACKAGING_BLOCK = 100

MARGIN_SMALL = 0.46  # sizes 1-7
MARGIN_LARGE = 0.33  # sizes 8-10
MARGIN_BAND_LIMIT = 7

IVA_RATE = 0.16

# flat stand-in for shipping inside each saved quote
INCLUDED_FEE_PER_QUOTE = 80.0

# revenue share of (margin + IVA)
SPLIT_PART_A = 0.55
SPLIT_PART_B = 0.45
