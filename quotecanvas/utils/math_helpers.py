"""Math helpers — ceiling-to-step, number formatting, safe coercion. No engine imports."""

from __future__ import annotations

import math
from typing import Any


def ceil_to_step(value: float, step: float) -> float:
    """Round ``value`` up to the next multiple of ``step``.

    Used for axis upper bounds: 995.5 → 1000 with step=100.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return math.ceil(value / step) * step


def fmt_number(value: float, precision: int = 3) -> str:
    """Compact decimal for SVG attributes: 12.500 → "12.5", 3.0 → "3"."""
    if not math.isfinite(value):
        return "0"
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def to_float(value: Any, default: float | None = None) -> float | None:
    """Best-effort float conversion for untrusted JSON scalars.

    Booleans are rejected (``True`` is not a coordinate). Strings like
    "12px" lose their unit suffix.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
        return number if math.isfinite(number) else default
    if isinstance(value, str):
        text = value.strip().lower()
        for unit in ("px", "pt", "%"):
            if text.endswith(unit):
                text = text[: -len(unit)].strip()
                break
        try:
            number = float(text)
        except ValueError:
            return default
        return number if math.isfinite(number) else default
    return default


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
