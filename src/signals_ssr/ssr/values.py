"""Resolution of interpolated values into markup.

Every value goes through ``classify_value`` once, which maps it onto a closed
set of renderable shapes. ``resolve_scalar`` and ``resolve_with_setups`` share
the same dispatch and differ only in whether hydration setups are kept.
"""

import inspect
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from signals_ssr.core.exceptions import MalformedFactoryError
from signals_ssr.core.signals import ReactiveContainer
from signals_ssr.core.view import DomSetup, View, VNode, required_parameters


class ValueKind(str, Enum):
    EMPTY = "empty"
    CONTAINER = "container"
    VIEW = "view"
    VNODE = "vnode"
    FACTORY = "factory"
    SEQUENCE = "sequence"
    LITERAL = "literal"


@dataclass
class Resolved:
    html: str = ""
    setups: List[DomSetup] = field(default_factory=list)


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, Iterator))


def classify_value(value: Any, unwrap: bool = True) -> ValueKind:
    """Map a value onto the renderable shape that decides how it resolves.

    Order matters: signals and Views are callable, so they are recognised
    before the generic factory case.
    """
    if value is None or value is False:
        return ValueKind.EMPTY
    if unwrap and isinstance(value, ReactiveContainer):
        return ValueKind.CONTAINER
    if isinstance(value, View):
        return ValueKind.VIEW
    if isinstance(value, VNode):
        return ValueKind.VNODE
    if callable(value):
        return ValueKind.FACTORY
    if _is_sequence(value):
        return ValueKind.SEQUENCE
    return ValueKind.LITERAL


def call_factory(factory: Any) -> Any:
    """Invoke a zero-argument factory, rejecting anything that is not one."""
    required = required_parameters(factory)
    if required:
        raise MalformedFactoryError(
            f"Interpolated callable {getattr(factory, '__name__', factory)!r} "
            f"requires arguments ({', '.join(required)}); only zero-argument factories "
            "can be rendered",
            factory,
        )

    result = factory()
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise MalformedFactoryError(
            f"Interpolated callable {getattr(factory, '__name__', factory)!r} returned an "
            "awaitable; rendering is synchronous",
            factory,
        )
    return result


def _resolve(value: Any, keep_setups: bool) -> Resolved:
    kind = classify_value(value)

    if kind is ValueKind.CONTAINER:
        inner = value.value
        if inner is value:
            # Containers that expose themselves (list-like proxies)
            kind = classify_value(value, unwrap=False)
        else:
            return _resolve(inner, keep_setups)

    if kind is ValueKind.EMPTY:
        return Resolved()
    if kind is ValueKind.VIEW:
        vnode = value()
        return Resolved(vnode.html, list(vnode.setups) if keep_setups else [])
    if kind is ValueKind.VNODE:
        return Resolved(value.html, list(value.setups) if keep_setups else [])
    if kind is ValueKind.FACTORY:
        return _resolve(call_factory(value), keep_setups)
    if kind is ValueKind.SEQUENCE:
        parts: List[str] = []
        setups: List[DomSetup] = []
        for item in value:
            resolved = _resolve(item, keep_setups)
            parts.append(resolved.html)
            setups.extend(resolved.setups)
        return Resolved("".join(parts), setups)
    return Resolved(str(value))


def resolve_scalar(value: Any) -> str:
    """Resolve a value to its text representation."""
    return _resolve(value, keep_setups=False).html


def resolve_with_setups(value: Any) -> Resolved:
    """Resolve a value to markup plus the hydration setups it carries."""
    return _resolve(value, keep_setups=True)
