"""Part-id allocation for hydration markers and event placeholders."""

import threading
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional


class PartAllocator:
    """Monotonic counter handing out part ids within one render pass.

    A render entry point snapshots the counter, zeroes it, renders, then puts
    the snapshot back. ``render_pass`` does that under the allocator's lock,
    so a shared instance never interleaves ids across concurrent renders.
    """

    def __init__(self, start: int = 0):
        self._next = start
        self._lock = threading.RLock()

    @property
    def current(self) -> int:
        return self._next

    def allocate(self) -> int:
        part_id = self._next
        self._next += 1
        return part_id

    def save(self) -> int:
        return self._next

    def reset(self) -> None:
        self._next = 0

    def restore(self, saved: int) -> None:
        self._next = saved

    @contextmanager
    def render_pass(self) -> Iterator["PartAllocator"]:
        with self._lock:
            saved = self.save()
            self.reset()
            try:
                yield self
            finally:
                self.restore(saved)

    def __repr__(self) -> str:
        return f"PartAllocator(next={self._next})"


# Process-wide allocator used when a caller does not bring its own
default_allocator = PartAllocator()

_active_allocator: ContextVar[Optional[PartAllocator]] = ContextVar(
    "signals_ssr_part_allocator", default=None
)


def current_allocator() -> PartAllocator:
    return _active_allocator.get() or default_allocator


def set_allocator(allocator: PartAllocator):
    return _active_allocator.set(allocator)


def reset_allocator(token) -> None:
    _active_allocator.reset(token)


def allocate_part_id() -> int:
    return current_allocator().allocate()


@contextmanager
def render_pass(allocator: Optional[PartAllocator] = None) -> Iterator[PartAllocator]:
    """Run one top-level render pass with ids starting at 0.

    The allocator is bound to the current context for the duration, so nested
    templates resolve ids from it rather than from the shared default.
    """
    allocator = allocator or current_allocator()
    token = set_allocator(allocator)
    try:
        with allocator.render_pass() as active:
            yield active
    finally:
        reset_allocator(token)
