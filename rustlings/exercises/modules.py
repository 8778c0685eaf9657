"""Modules: private helpers, renamed imports and the system clock."""

from __future__ import annotations

import time

_PEAR = "Pear"
_APPLE = "Apple"
_CUCUMBER = "Cucumber"
_CARROT = "Carrot"

fruit = _PEAR
veggie = _CUCUMBER


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> None:
    """Make a sausage from the secret recipe."""
    _get_secret_recipe()
    print("sausage!")


def favorite_snacks() -> str:
    """The favourite fruit and vegetable."""
    return f"favorite snacks: {fruit} and {veggie}"


def seconds_since_epoch() -> int:
    """Whole seconds since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)