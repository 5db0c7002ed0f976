"""View and VNode, the two renderable shapes produced by templates."""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from signals_ssr.core.exceptions import MalformedFactoryError

# A deferred hydration callback. Receives the client root element and may
# return a cleanup function. Never invoked on the server.
DomSetup = Callable[[Any], Optional[Callable[[], None]]]


@dataclass
class VNode:
    """Realized output of a View."""

    html: str
    setups: List[DomSetup] = field(default_factory=list)


class View:
    """Lazy producer of a VNode.

    Every call re-runs the producer; nothing is memoized.
    """

    def __init__(self, producer: Callable[[], VNode]):
        self._producer = producer
        self.__name__ = getattr(producer, "__name__", "view")

    def __call__(self) -> VNode:
        vnode = self._producer()
        if not isinstance(vnode, VNode):
            raise MalformedFactoryError(
                f"View {self.__name__!r} produced {type(vnode).__name__}, expected a VNode",
                vnode,
            )
        return vnode

    def __repr__(self) -> str:
        return f"View({self.__name__})"


def required_parameters(fn: Callable[..., Any]) -> List[str]:
    """Names of the parameters ``fn`` cannot be called without.

    Builtins without an introspectable signature report none.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return []
    return [
        p.name
        for p in signature.parameters.values()
        if p.default is inspect.Parameter.empty
        and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]


def as_view(value: Any) -> View:
    """Promote a zero-argument callable to a View (Views pass through)."""
    if isinstance(value, View):
        return value
    return View(value)
