"""Server-side template renderer.

``html(literals, *values)`` is the server counterpart of the client's tagged
template. Content-position values are wrapped in hydration markers, event
handler attributes get an ``ev-part-{id}`` placeholder, and plain attribute
values are printed as resolved text.
"""

from collections.abc import Iterator
from typing import Any, List, Sequence

from signals_ssr.core.exceptions import InvalidArgumentError
from signals_ssr.core.view import DomSetup, View, VNode
from signals_ssr.ssr.context import PointKind, classify_interpolation_point
from signals_ssr.ssr.parts import allocate_part_id
from signals_ssr.ssr.values import resolve_scalar, resolve_with_setups

TEXT_PART = "text-part-{}"
EVENT_PART = "ev-part-{}"


def text_marker(part_id: int, text: str) -> str:
    marker = TEXT_PART.format(part_id)
    return f"<!--s{marker}-->{text}<!--e{marker}-->"


def event_placeholder(part_id: int) -> str:
    return EVENT_PART.format(part_id)


def html(literals: Sequence[str], *values: Any) -> View:
    """Build a View from literal fragments and the values between them.

    ``literals`` must hold exactly one more fragment than there are values.
    """
    if isinstance(literals, str):
        literals = [literals]
    literals = list(literals)
    if len(literals) != len(values) + 1:
        raise InvalidArgumentError(
            f"Template expects {len(literals) - 1} value(s) for {len(literals)} "
            f"literal fragment(s), got {len(values)}"
        )
    # Iterators are one-shot; keep a copy so every render sees all items
    values = tuple(list(v) if isinstance(v, Iterator) else v for v in values)

    def render() -> VNode:
        out: List[str] = []
        setups: List[DomSetup] = []

        for i, literal in enumerate(literals):
            out.append(literal)
            if i >= len(values):
                continue

            expr = values[i]

            if isinstance(expr, (View, VNode)):
                resolved = resolve_with_setups(expr)
                out.append(resolved.html)
                setups.extend(resolved.setups)
                continue

            current = "".join(out)
            out = [current]
            point = classify_interpolation_point(current)

            if point.kind is PointKind.EVENT_ATTRIBUTE:
                # Handlers only exist on the client; never serialize them
                out.append(event_placeholder(allocate_part_id()))
            elif point.kind is PointKind.ATTRIBUTE:
                out.append(resolve_scalar(expr))
            else:
                # Wrapper id before descending, so ids read in document order
                part_id = allocate_part_id()
                out.append(text_marker(part_id, resolve_scalar(expr)))

        return VNode(html="".join(out), setups=setups)

    return View(render)
