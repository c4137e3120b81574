"""ID and seed generation.

Two strategies:
- Random IDs (documents, pages, layers without one): 21 url-safe chars.
- Variation seeds: ``<base36 epoch-ms>-<8 base36 chars>``, opaque to callers.

INVARIANT: IDs are assigned once. A layer that arrives without an id gets
one at validation time and keeps it through layout and assembly.
"""

from __future__ import annotations

import re
import secrets
import string
import time

_ID_ALPHABET = string.ascii_letters + string.digits + "_-"
_BASE36_ALPHABET = string.digits + string.ascii_lowercase

ID_LENGTH = 21
SEED_PATTERN: re.Pattern[str] = re.compile(r"^[0-9a-z]+-[0-9a-z]{1,8}$")


def generate_id(length: int = ID_LENGTH) -> str:
    """Return a random url-safe identifier."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def to_base36(value: int) -> str:
    """Render a non-negative integer in lowercase base 36."""
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def generate_seed() -> str:
    """Generate a fresh variation seed from the clock and a random suffix."""
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(8))
    return f"{to_base36(millis)}-{suffix}"
