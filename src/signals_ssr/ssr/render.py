"""Render entry points: a View or Component in, one HTML string out."""

import logging
from typing import Any, Optional

from signals_ssr.core.component import Component
from signals_ssr.core.exceptions import InvalidArgumentError
from signals_ssr.core.view import View
from signals_ssr.ssr.parts import PartAllocator, render_pass

log = logging.getLogger(__name__)


def render_component_to_string(
    component: Component, props: Any = None, allocator: Optional[PartAllocator] = None
) -> str:
    """Render ``component(props)`` with part ids starting at 0."""
    if not isinstance(component, Component):
        raise InvalidArgumentError(
            f"render_component_to_string expected a Component, got {type(component).__name__}",
            component,
        )

    with render_pass(allocator) as parts:
        log.debug("Rendering component %r", component)
        vnode = component(props)()
        log.debug("Rendered %r: %d part(s), %d chars", component, parts.current, len(vnode.html))
        return vnode.html


def render_to_string(
    target: Any, props: Any = None, allocator: Optional[PartAllocator] = None
) -> str:
    """Render a View, or a Component with ``props``, to HTML.

    The part-id counter is reset for the pass and restored afterwards, even
    when rendering raises.
    """
    if isinstance(target, Component):
        return render_component_to_string(target, props, allocator)

    if not isinstance(target, View):
        raise InvalidArgumentError(
            f"render_to_string expected a View or Component, got {type(target).__name__}",
            target,
        )

    with render_pass(allocator) as parts:
        log.debug("Rendering view %r", target)
        vnode = target()
        log.debug("Rendered %r: %d part(s), %d chars", target, parts.current, len(vnode.html))
        return vnode.html
