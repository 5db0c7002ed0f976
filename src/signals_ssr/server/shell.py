from typing import Iterable, Optional

from jinja2 import Environment, PackageLoader, select_autoescape

# Document shell templates ship inside the package
_env = Environment(
    loader=PackageLoader("signals_ssr.server", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_document(
    app_html: str,
    script: Optional[str] = None,
    stylesheets: Iterable[str] = (),
    title: str = "signals SSR",
    lang: str = "en",
    template_name: str = "document.html",
) -> str:
    """Embed server-rendered app markup into the HTML document shell.

    ``app_html`` is inserted as-is; asset URLs, title and lang are escaped.
    """
    template = _env.get_template(template_name)
    return template.render(
        app_html=app_html,
        script=script,
        stylesheets=list(stylesheets),
        title=title,
        lang=lang,
    )
