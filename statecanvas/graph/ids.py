"""Monotonic id counters for nodes and edges."""

import re
from typing import Iterable

_SUFFIX_RE = re.compile(r"^(?P<prefix>.+)_(?P<number>\d+)$")


def parse_id_suffix(item_id: str, prefix: str) -> int | None:
    """Return the integer suffix of an id of the form ``prefix_<int>``.

    Ids with another prefix or no numeric suffix return None.
    """
    match = _SUFFIX_RE.match(item_id)
    if match is None or match.group("prefix") != prefix:
        return None
    return int(match.group("number"))


class IdCounter:
    """Mints ``prefix_<n>`` ids from a counter that only moves forward."""

    def __init__(self, prefix: str, start: int = 0):
        self.prefix = prefix
        self._next = start

    @property
    def next_value(self) -> int:
        """The number the next minted id will carry."""
        return self._next

    def mint(self) -> str:
        """Return a fresh id and advance the counter."""
        item_id = f"{self.prefix}_{self._next}"
        self._next += 1
        return item_id

    def advance_to(self, value: int) -> None:
        """Move the counter forward to ``value``; never moves it back."""
        if value > self._next:
            self._next = value

    def seed_from(self, ids: Iterable[str]) -> None:
        """Advance past the highest numeric suffix found in ``ids``."""
        suffixes = [
            n for n in (parse_id_suffix(i, self.prefix) for i in ids) if n is not None
        ]
        if suffixes:
            self.advance_to(max(suffixes) + 1)
