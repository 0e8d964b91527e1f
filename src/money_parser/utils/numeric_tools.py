from __future__ import annotations

import re

# Decimal literal with optional sign, fractional part and exponent, or one of the special literals.
# No thousands separators, no underscores, no surrounding whitespace.
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_float_literal(text: str) -> float:
    """Parses a floating-point literal into `float`.

    Stricter than builtin `float()`: surrounding whitespace and digit-group underscores
    (e.g. "1_000") are rejected.

    Args:
        text: Literal to parse, e.g. "42.4", "-1", ".5", "1e3", "NaN".

    Returns:
        Parsed value as `float`.

    Raises:
        ValueError: If $text is not a valid floating-point literal.
    """
    if not text:
        raise ValueError("cannot parse float from empty string")

    if _FLOAT_LITERAL.fullmatch(text) is None:
        raise ValueError(f"invalid float literal: '{text}'")

    return float(text)
