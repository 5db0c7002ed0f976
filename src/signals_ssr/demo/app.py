from dataclasses import dataclass

from signals_ssr.core.component import define_component
from signals_ssr.demo.counter import Counter, CounterProps
from signals_ssr.ssr.renderer import html


@dataclass
class AppProps:
    client: bool = True
    vite_logo: str = "/vite.svg"
    python_logo: str = "/assets/python.svg"


@define_component
def App(props: AppProps):
    children = {"Counter": Counter(CounterProps(label="Clicks"))}

    return html(
        [
            '<div>\n'
            '    <a href="https://vite.dev">\n'
            '        <img src="',
            '" alt="vite logo" class="logo" />\n'
            "    </a>\n"
            '    <a href="https://www.python.org/">\n'
            '        <img src="',
            '" alt="python logo" class="logo vanilla" />\n'
            "    </a>\n"
            "    <h1>Vite + Python ",
            "</h1>\n    ",
            "\n    <p>Click logos to learn more</p>\n</div>",
        ],
        props.vite_logo,
        props.python_logo,
        "CSR" if props.client else "SSR",
        children["Counter"],
    )
