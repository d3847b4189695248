"""Drills on hiding helpers, re-exporting names and using library imports."""

from __future__ import annotations

from datetime import datetime, timezone

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

fruit = PEAR
veggie = CUCUMBER

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> None:
    """Make a sausage from the secret recipe and announce it."""
    _get_secret_recipe()
    print("sausage!")


def favorite_snacks() -> str:
    """The line naming the favourite fruit and vegetable."""
    return f"favorite snacks: {fruit} and {veggie}"


def epoch_message(now: datetime | None = None) -> str:
    """How many whole seconds ago the Unix epoch was.

    A naive `now` is taken to be UTC; a time before the epoch is an error.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    elapsed = now - _UNIX_EPOCH
    if elapsed.total_seconds() < 0:
        raise ValueError("SystemTime before UNIX EPOCH!")
    seconds = elapsed.days * 86400 + elapsed.seconds
    return f"1970-01-01 00:00:00 UTC was {seconds} seconds ago!"