"""Content id generation.

The engine takes an id generator as a plain callable so tests can pass a
deterministic sequence instead of patching ``uuid``.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable, Iterator

IdGenerator = Callable[[], str]


def uuid_content_id() -> str:
    """Return a fresh random UUID4 string."""
    return str(uuid.uuid4())


def sequence_ids(ids: Iterable[str]) -> IdGenerator:
    """Build a generator that hands out ``ids`` in order.

    Raises:
        RuntimeError: When called after the sequence is exhausted.
    """
    iterator: Iterator[str] = iter(ids)

    def _next_id() -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise RuntimeError("Content id sequence exhausted") from None

    return _next_id
