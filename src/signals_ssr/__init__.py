try:
    from ._version import __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("signals-ssr")
    except PackageNotFoundError:
        __version__ = "unknown"

from signals_ssr.core.component import Component, define_component
from signals_ssr.core.exceptions import (
    ErrorKind,
    InvalidArgumentError,
    MalformedFactoryError,
    RenderError,
)
from signals_ssr.core.signals import (
    CircularDependencyError,
    ReactivityError,
    batch,
    computed,
    effect,
    filter_array,
    map_array,
    reduce_array,
    signal,
    watch,
    watch_once,
)
from signals_ssr.core.view import View, VNode
from signals_ssr.ssr.parts import PartAllocator
from signals_ssr.ssr.render import render_component_to_string, render_to_string
from signals_ssr.ssr.renderer import html
from signals_ssr.ssr.values import resolve_scalar, resolve_with_setups

__all__ = [
    "Component",
    "define_component",
    "View",
    "VNode",
    "html",
    "render_to_string",
    "render_component_to_string",
    "resolve_scalar",
    "resolve_with_setups",
    "PartAllocator",
    "signal",
    "computed",
    "effect",
    "batch",
    "watch",
    "watch_once",
    "map_array",
    "filter_array",
    "reduce_array",
    "ErrorKind",
    "RenderError",
    "InvalidArgumentError",
    "MalformedFactoryError",
    "CircularDependencyError",
    "ReactivityError",
]
