from dataclasses import dataclass

from signals_ssr.core.component import define_component
from signals_ssr.core.signals import computed, signal
from signals_ssr.ssr.renderer import html


@dataclass
class CounterProps:
    label: str


@define_component
def Counter(props: CounterProps):
    count = signal(0)
    double = computed(lambda: count() * 2)

    # Bound on the client through the ev-part placeholders
    def handle_click(event=None):
        count.set(lambda c: c + 1)

    def handle_right_click(event=None):
        count.set(lambda c: c - 1)

    return html(
        [
            '<div class="card">\n    <button type="button" onclick="',
            '" oncontextmenu="',
            '">\n        ',
            ": ",
            " (x2: ",
            ")\n    </button>\n</div>",
        ],
        handle_click,
        handle_right_click,
        props.label,
        count,
        double,
    )
