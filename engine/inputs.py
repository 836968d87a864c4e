"""
inputs.py — Input validation layer
===================================
Turns raw user input into the validated arrays / targets the steppers
assume.  The steppers never validate anything themselves; everything
that can be rejected is rejected here, before a stepper runs.
"""

import random
from typing import Iterable, List, Optional, Tuple

import config
from algorithms import get_algorithm


class InputError(ValueError):
    """User-facing validation failure."""


def _coerce_int(raw, what: str) -> int:
    if isinstance(raw, bool):
        raise InputError(f"Invalid {what}: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    try:
        return int(str(raw).strip(), 10)
    except ValueError:
        raise InputError(f"Invalid {what}: {raw!r}") from None


def validate_value(value: int, what: str = "number") -> int:
    if not config.MIN_VALUE <= value <= config.MAX_VALUE:
        raise InputError(
            f"{what.capitalize()} out of range ({config.MIN_VALUE}-{config.MAX_VALUE}): {value}"
        )
    return value


def validate_array(values: Iterable) -> List[int]:
    """Coerce and bounds-check a sequence of values.  Returns a new list."""
    array = [validate_value(_coerce_int(v, "number")) for v in values]
    if not config.MIN_ARRAY_SIZE <= len(array) <= config.MAX_ARRAY_SIZE:
        raise InputError(
            f"Array size must be between {config.MIN_ARRAY_SIZE} and {config.MAX_ARRAY_SIZE}, "
            f"got {len(array)}."
        )
    return array


def parse_array(text: str) -> List[int]:
    """Parse comma-separated input such as `"5, 3, 8, 1, 9"`.  Empty items are ignored."""
    items = [s.strip() for s in text.split(",")]
    return validate_array(s for s in items if s)


def validate_target(value) -> int:
    return validate_value(_coerce_int(value, "target number"), "target number")


def parse_target(text: str) -> int:
    return validate_target(text)


def parse_seed(raw) -> Optional[int]:
    """Optional RNG seed: None stays None, anything else must be an integer."""
    if raw is None:
        return None
    return _coerce_int(raw, "seed")


def parse_probability(raw, what: str = "edge probability") -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise InputError(f"Invalid {what}: {raw!r}")
    try:
        prob = float(raw)
    except ValueError:
        raise InputError(f"Invalid {what}: {raw!r}") from None
    # rejects NaN too
    if not 0.0 <= prob <= 1.0:
        raise InputError(f"{what.capitalize()} must be between 0 and 1, got {raw!r}")
    return prob


def random_array(size: int = config.DEFAULT_ARRAY_SIZE, seed: Optional[int] = None) -> List[int]:
    """Uniform random values in [MIN_VALUE, MAX_VALUE]."""
    size = _coerce_int(size, "array size")
    if not config.MIN_ARRAY_SIZE <= size <= config.MAX_ARRAY_SIZE:
        raise InputError(
            f"Array size must be between {config.MIN_ARRAY_SIZE} and {config.MAX_ARRAY_SIZE}, got {size}."
        )
    rng = random.Random(parse_seed(seed))
    return [rng.randint(config.MIN_VALUE, config.MAX_VALUE) for _ in range(size)]


def prepare_search_input(key: str, array: List[int]) -> Tuple[List[int], bool]:
    """
    Presort for algorithms that need sorted input (binary search).
    Returns (array_to_search, reordered) where `reordered` tells the caller
    its input order changed and should be reported back to the user.
    The input list itself is left untouched.
    """
    info = get_algorithm(key)
    if info is None or not info.requires_sorted_input:
        return list(array), False
    ordered = sorted(array)
    return ordered, ordered != list(array)
