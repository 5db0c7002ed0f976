from typing import Any, Callable, Generic, TypeVar

from signals_ssr.core.exceptions import InvalidArgumentError
from signals_ssr.core.signals import ReactiveContainer
from signals_ssr.core.view import View, as_view, required_parameters

P = TypeVar("P")


class Component(Generic[P]):
    """A reusable ``props -> View`` unit.

    Usage:
        Greeting = define_component(
            lambda props: html(["<h1>", "</h1>"], props["name"])
        )
        render_to_string(Greeting, {"name": "Ada"})
    """

    def __init__(self, setup: Callable[[P], Any]):
        self.setup = setup
        self.__name__ = getattr(setup, "__name__", "component")
        self.__doc__ = getattr(setup, "__doc__", None)

    def __call__(self, props: P) -> View:
        view = self.setup(props)
        if isinstance(view, View):
            return view
        # Signals are callable too, but they hold values, not markup
        if callable(view) and not isinstance(view, ReactiveContainer):
            if not required_parameters(view):
                return as_view(view)
        raise InvalidArgumentError(
            f"Component {self.__name__!r} setup must return a View, got {type(view).__name__}",
            view,
        )

    def __repr__(self) -> str:
        return f"Component({self.__name__})"


def define_component(setup: Callable[[P], Any]) -> Component[P]:
    """Wrap a ``props -> View`` setup function into a Component.

    Can be used as a decorator:
        @define_component
        def Counter(props):
            ...
            return html([...], ...)
    """
    return Component(setup)
