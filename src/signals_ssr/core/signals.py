from contextlib import contextmanager
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Protocol,
    Sequence,
    Set,
    TypeVar,
    Union,
    runtime_checkable,
)
from weakref import WeakSet

T = TypeVar("T")
U = TypeVar("U")


class CircularDependencyError(Exception):
    """Raised when a computed value has a circular dependency."""

    pass


class ReactivityError(Exception):
    """Raised on invalid reactivity operations (e.g. writing a signal in a computed)."""

    pass


_TRACKING_STACK: list = []  # Module-level, sync-only
_BATCH_DEPTH: int = 0
_PENDING_EFFECTS: list["Effect"] = []


@runtime_checkable
class Subscriber(Protocol):
    dependencies: Set[Any]

    def execute(self) -> None: ...


@runtime_checkable
class ReactiveContainer(Protocol):
    """Anything exposing a current value. Unwrapped before rendering."""

    @property
    def value(self) -> Any: ...


def _track(source: Any) -> None:
    if _TRACKING_STACK:
        subscriber = _TRACKING_STACK[-1]
        source._subscribers.add(subscriber)
        subscriber.dependencies.add(source)


def _untrack_all(subscriber: Any) -> None:
    for dep in list(subscriber.dependencies):
        if hasattr(dep, "_subscribers"):
            dep._subscribers.discard(subscriber)
    subscriber.dependencies.clear()


class Signal(Generic[T]):
    """Writable reactive value.

    Reading ``.value`` (or calling the signal) inside a computed or an effect
    registers the signal as a dependency of that subscriber.
    """

    def __init__(self, value: T):
        self._value = value
        self._subscribers: WeakSet[Subscriber] = WeakSet()

    @property
    def value(self) -> T:
        _track(self)
        return self._value

    @value.setter
    def value(self, new_val: T) -> None:
        if _TRACKING_STACK and isinstance(_TRACKING_STACK[-1], Computed):
            raise ReactivityError(
                f"Cannot write a signal inside a computed (computed fn={_TRACKING_STACK[-1].fn.__name__})"
            )
        if self._value == new_val:
            return
        self._value = new_val
        self._notify()

    def __call__(self) -> T:
        return self.value

    def set(self, value: Any) -> None:
        """Set a new value, or apply ``value`` as an updater if it is callable."""
        if callable(value):
            self.value = value(self._value)
        else:
            self.value = value

    def update(self, updater: Callable[[T], T]) -> None:
        self.value = updater(self._value)

    def peek(self) -> T:
        """Read value without tracking dependencies."""
        return self._value

    def _notify(self) -> None:
        start_batch()
        try:
            for sub in list(self._subscribers):
                sub.execute()
        finally:
            end_batch()

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __repr__(self) -> str:
        return f"signal({self._value!r})"


class Computed(Generic[T]):
    """Lazy, memoized computed value. Auto-tracks signal dependencies."""

    def __init__(self, fn: Callable[[], T]):
        self.fn = fn
        self.dependencies: Set[Any] = set()
        self._subscribers: WeakSet[Subscriber] = WeakSet()  # downstream Computed/Effect
        self._cache: Any = None
        self._dirty: bool = True
        self._computing: bool = False

    @property
    def value(self) -> T:
        if self._computing:
            raise CircularDependencyError(
                f"Circular dependency detected in computed (fn={getattr(self.fn, '__name__', str(self.fn))})"
            )

        if self._dirty:
            _untrack_all(self)

            self._computing = True
            _TRACKING_STACK.append(self)
            try:
                self._cache = self.fn()
            finally:
                _TRACKING_STACK.pop()
                self._computing = False
            self._dirty = False

        _track(self)
        return self._cache

    def __call__(self) -> T:
        return self.value

    def peek(self) -> T:
        """Read the cached value without tracking or recomputing."""
        return self._cache

    def execute(self) -> None:
        """Called when an upstream dependency changes."""
        if not self._dirty:
            self._dirty = True
            for sub in list(self._subscribers):
                sub.execute()

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __repr__(self) -> str:
        return f"computed({self._cache!r}, dirty={self._dirty})"


class Effect:
    """Side-effect that auto-runs when dependencies change."""

    def __init__(self, fn: Callable[[], None]):
        self.fn = fn
        self.dependencies: Set[Any] = set()
        self._disposed: bool = False
        self.execute()  # initial run to capture deps

    def execute(self) -> None:
        if self._disposed:
            return

        if _BATCH_DEPTH > 0:
            if self not in _PENDING_EFFECTS:
                _PENDING_EFFECTS.append(self)
            return

        _untrack_all(self)

        _TRACKING_STACK.append(self)
        try:
            self.fn()
        finally:
            _TRACKING_STACK.pop()

    def dispose(self) -> None:
        self._disposed = True
        _untrack_all(self)


def signal(initial_value: T) -> Signal[T]:
    return Signal(initial_value)


def computed(fn: Callable[[], T]) -> Computed[T]:
    return Computed(fn)


def effect(fn: Callable[[], None]) -> Effect:
    return Effect(fn)


def start_batch() -> None:
    global _BATCH_DEPTH
    _BATCH_DEPTH += 1


def end_batch() -> None:
    global _BATCH_DEPTH
    _BATCH_DEPTH -= 1
    if _BATCH_DEPTH == 0:
        # Effects may enqueue further effects while flushing
        while _PENDING_EFFECTS:
            eff = _PENDING_EFFECTS.pop(0)
            eff.execute()


@contextmanager
def batch() -> Iterator[None]:
    """Defer effects until the outermost batch exits."""
    start_batch()
    try:
        yield
    finally:
        end_batch()


@contextmanager
def untracked() -> Iterator[None]:
    """Read signals inside the block without registering dependencies."""
    saved = list(_TRACKING_STACK)
    _TRACKING_STACK.clear()
    try:
        yield
    finally:
        _TRACKING_STACK[:] = saved


# ---------- Watchers ----------

WatchSource = Union[Callable[[], T], ReactiveContainer]
OnCleanup = Callable[[Callable[[], None]], None]


def _getter(source: Any) -> Callable[[], Any]:
    if callable(source):
        return source
    if isinstance(source, ReactiveContainer):
        return lambda: source.value
    raise TypeError(f"Cannot watch {type(source).__name__}; pass a signal or a callable")


class Watcher:
    """Calls ``callback(value, old_value, on_cleanup)`` when a source changes.

    The source is tracked; the callback is not. A cleanup registered through
    ``on_cleanup`` runs before the next callback and on ``stop()``.
    """

    def __init__(
        self,
        source: WatchSource,
        callback: Callable[[Any, Any, OnCleanup], None],
        immediate: bool = False,
        once: bool = False,
    ):
        self._get = _getter(source)
        self._callback = callback
        self._immediate = immediate
        self._once = once
        self._old: Any = None
        self._initialized = False
        self._cleanup: Optional[Callable[[], None]] = None
        self._stopped = False
        self._effect: Optional[Effect] = None
        effect_ = Effect(self._run)
        if self._stopped:
            effect_.dispose()
        self._effect = effect_

    def _on_cleanup(self, fn: Callable[[], None]) -> None:
        self._cleanup = fn

    def _run(self) -> None:
        value = self._get()
        if not self._initialized and not self._immediate:
            self._old = value
            self._initialized = True
            return
        if self._initialized and value == self._old:
            return

        old = self._old if self._initialized else None
        self._old = value
        self._initialized = True
        with untracked():
            self._run_cleanup()
            self._callback(value, old, self._on_cleanup)
        if self._once:
            self.stop()

    def _run_cleanup(self) -> None:
        if self._cleanup is not None:
            cleanup, self._cleanup = self._cleanup, None
            cleanup()

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        self._run_cleanup()
        if self._effect is not None:
            self._effect.dispose()

    __call__ = stop


def watch(
    source: WatchSource,
    callback: Callable[[Any, Any, OnCleanup], None],
    immediate: bool = False,
) -> Watcher:
    """Watch ``source``; the returned handle stops watching when called.

    Subscribers are held weakly, so keep the handle for as long as the
    watch should stay active.
    """
    return Watcher(source, callback, immediate=immediate)


def watch_once(
    source: WatchSource,
    callback: Callable[[Any, Any, OnCleanup], None],
    immediate: bool = False,
) -> Watcher:
    """Like ``watch`` but stops after the first callback."""
    return Watcher(source, callback, immediate=immediate, once=True)


# ---------- Array helpers ----------

_MISSING: Any = object()


def _is_array(source: Any) -> bool:
    return isinstance(source, (list, tuple))


def _map(items: Sequence[T], mapper: Callable[[T, int, Sequence[T]], U]) -> List[U]:
    return [mapper(item, i, items) for i, item in enumerate(items)]


def _filter(items: Sequence[T], predicate: Callable[[T, int, Sequence[T]], bool]) -> List[T]:
    return [item for i, item in enumerate(items) if predicate(item, i, items)]


def _reduce(items: Sequence[T], reducer: Callable[..., Any], initial: Any) -> Any:
    indexed = enumerate(items)
    if initial is _MISSING:
        try:
            _, acc = next(indexed)
        except StopIteration:
            raise TypeError("reduce_array() of empty sequence with no initial value") from None
    else:
        acc = initial
    for i, item in indexed:
        acc = reducer(acc, item, i, items)
    return acc


def map_array(source: Any, mapper: Callable[[Any, int, Sequence[Any]], Any]) -> Any:
    """Map ``mapper(value, index, items)`` over a list.

    A plain list or tuple is mapped eagerly and a list is returned. A signal,
    computed or getter gives a Computed list that follows the source.
    """
    if _is_array(source):
        return _map(source, mapper)
    get = _getter(source)
    return computed(lambda: _map(get(), mapper))


def filter_array(source: Any, predicate: Callable[[Any, int, Sequence[Any]], bool]) -> Any:
    """Keep the items for which ``predicate(value, index, items)`` is true."""
    if _is_array(source):
        return _filter(source, predicate)
    get = _getter(source)
    return computed(lambda: _filter(get(), predicate))


def reduce_array(source: Any, reducer: Callable[..., Any], initial: Any = _MISSING) -> Any:
    """Fold ``reducer(acc, value, index, items)`` over a list.

    Without ``initial`` the first item seeds the accumulator.
    """
    if _is_array(source):
        return _reduce(source, reducer, initial)
    get = _getter(source)
    return computed(lambda: _reduce(get(), reducer, initial))
