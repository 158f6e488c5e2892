from __future__ import annotations

import re

_DECIMAL_RE = re.compile(r"^(-)?(\d+)(?:\.(\d+))?$")


def format_units(raw: int, decimals: int) -> str:
    """
    Render `raw / 10**decimals` exactly.

    Integer arithmetic only. Trailing fractional zeros are stripped but one
    fractional digit is kept ("1.5", "1.0", "0.0"); decimals=0 gives the
    bare integer.
    """
    if decimals < 0:
        raise ValueError("decimals must be >= 0")
    raw = int(raw)
    sign = "-" if raw < 0 else ""
    raw = abs(raw)
    if decimals == 0:
        return f"{sign}{raw}"

    scale = 10 ** decimals
    whole = raw // scale
    frac = raw % scale
    frac_str = str(frac).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{frac_str}"


def parse_units(text: str, decimals: int) -> int:
    """
    Inverse of format_units: "1.5" with 18 decimals -> 1500000000000000000.
    """
    m = _DECIMAL_RE.match(text.strip())
    if not m:
        raise ValueError(f"not a decimal string: {text!r}")
    sign, whole, frac = m.groups()
    frac = (frac or "").rstrip("0")
    if len(frac) > decimals:
        raise ValueError(f"{text!r} has more than {decimals} fractional digits")
    value = int(whole) * 10 ** decimals + int(frac.ljust(decimals, "0") or "0")
    return -value if sign else value


def format_ether(wei: int) -> str:
    return format_units(wei, 18)
