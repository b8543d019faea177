"""Seed normalisation shared by the CLI and the HTTP API."""
import hashlib
import random
import re

MAX_SEED = 9223372036854775807

# ASCII only: str.isdigit() also accepts digits int() cannot parse
_INT_SEED = re.compile(r"[+-]?[0-9]+")


def random_seed() -> int:
    return random.randint(1, 1_000_000)


def coerce_seed(value):
    """Convert a provided seed (int or str) into a bounded 64-bit signed int.

    ``None`` or an empty string yields a fresh random seed; signed ASCII integer
    strings are reduced exactly like ints; any other string is hashed so word
    seeds stay reproducible.
    """
    if value is None:
        return random_seed()
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value % MAX_SEED
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return random_seed()
        if _INT_SEED.fullmatch(s):
            return int(s) % MAX_SEED
        h = hashlib.sha256(s.encode('utf-8')).digest()
        return int.from_bytes(h[:8], 'big') % MAX_SEED
    raise TypeError(f"unsupported seed type: {type(value).__name__}")


__all__ = ["coerce_seed", "random_seed", "MAX_SEED"]
