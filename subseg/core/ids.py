"""Segment id generation."""

from __future__ import annotations

import itertools
import secrets
import time
from collections.abc import Callable

IdFactory = Callable[[], str]

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def generate_id() -> str:
    """Return ``seg_<epoch-ms>_<7 random base36 chars>``."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(7))
    return f"seg_{int(time.time() * 1000)}_{suffix}"


def counter_ids(prefix: str = "seg") -> IdFactory:
    """Deterministic id factory yielding ``<prefix>_1``, ``<prefix>_2``, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}_{next(counter)}"
