"""Canonical text for numeric values."""

from __future__ import annotations

import math
from decimal import Decimal


def format_number(value: float) -> str:
    """Return the canonical decimal text for *value*.

    Starts from the shortest round-trip ``repr`` and always writes it in
    positional notation, never with an exponent (``1e20`` becomes
    ``"100000000000000000000"``, ``1e-05`` becomes ``"0.00001"``). Trailing
    fractional zeros and a dangling decimal point are removed, so ``3.0``
    becomes ``"3"`` and ``3.50`` becomes ``"3.5"``. Integral digits are left
    alone (``30.0`` is ``"30"``). ``inf`` and ``nan`` are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")
