"""
Deterministic JSON rendering and a short content hash.

Object keys are sorted, arrays keep their order, and the output has no
whitespace, so equal values always render to identical text.
"""

import json
import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any

import numpy as np
from pydantic import BaseModel

HASH_SEED = 5381
HASH_MASK = 0xFFFFFFFF


def format_number(val: float) -> str:
    """
    Render a finite float the way ECMAScript Number#toString does.

    Shortest round-trip digits. Magnitudes in [1e-6, 1e21) use plain
    notation, anything else scientific with a signed exponent (1e-7, 1e+21).
    """
    if val == 0:
        return "0"
    if val < 0:
        return "-" + format_number(-val)

    _, digit_tuple, exponent = Decimal(repr(val)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def json_stable(value: Any) -> str:
    """
    Render value as compact JSON with lexicographically sorted keys.

    None and non-finite numbers render as null, dates as ISO strings,
    pydantic models as their by-alias dump. Unsupported objects fall back
    to str(value) as a JSON string.

    Raises:
        TypeError: If a container references itself
    """
    seen = set()

    def fmt(val: Any) -> str:
        if val is None:
            return "null"
        if isinstance(val, bool):
            return "true" if val else "false"
        if isinstance(val, int):
            return str(val)
        if isinstance(val, float):
            return format_number(val) if math.isfinite(val) else "null"
        if isinstance(val, Decimal):
            return str(val) if val.is_finite() else "null"
        if isinstance(val, str):
            return json.dumps(val)
        if isinstance(val, (datetime, date)):
            return json.dumps(val.isoformat())
        if isinstance(val, BaseModel):
            return fmt(val.model_dump(by_alias=True))

        if isinstance(val, (list, tuple, dict)):
            if id(val) in seen:
                raise TypeError("Converting circular structure to JSON")
            seen.add(id(val))
            try:
                if isinstance(val, dict):
                    entries = (
                        json.dumps(str(k)) + ":" + fmt(val[k])
                        for k in sorted(val, key=str)
                    )
                    return "{" + ",".join(entries) + "}"
                return "[" + ",".join(fmt(item) for item in val) + "]"
            finally:
                seen.discard(id(val))

        return json.dumps(str(val))

    return fmt(value)


def stable_hash(value: Any) -> str:
    """
    Short non-cryptographic hash of json_stable(value), suitable for cache
    keys and ETags.

    djb2 with xor over UTF-16 code units, kept to 32 unsigned bits and
    rendered in lowercase base 36.
    """
    text = json_stable(value).encode("utf-16-le")
    h = HASH_SEED
    for i in range(0, len(text), 2):
        unit = text[i] | (text[i + 1] << 8)
        h = ((h * 33) & HASH_MASK) ^ unit
    return np.base_repr(h, base=36).lower()
