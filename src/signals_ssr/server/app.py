"""Starlette application serving the server-rendered root component."""

import logging
from typing import Any, Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from signals_ssr.config import Settings
from signals_ssr.core.exceptions import RenderError
from signals_ssr.server.manifest import BuildManifest, ManifestError
from signals_ssr.server.shell import render_document
from signals_ssr.ssr.render import render_to_string

log = logging.getLogger(__name__)


def _default_root() -> Any:
    from signals_ssr.demo.app import App, AppProps

    return App, AppProps(client=False)


def _load_manifest(settings: Settings) -> Optional[BuildManifest]:
    try:
        return BuildManifest.load(settings.manifest_path)
    except ManifestError as e:
        log.warning("%s; serving pages without client assets", e)
        return None


def create_app(
    root: Any = None,
    props: Any = None,
    settings: Optional[Settings] = None,
    manifest: Optional[BuildManifest] = None,
    debug: Optional[bool] = None,
) -> Starlette:
    """Build the HTTP app.

    Args:
        root: View or Component rendered at ``/`` (defaults to the demo App)
        props: Props passed to ``root`` when it is a Component
        settings: Defaults to ``Settings.from_env()``
        manifest: Pre-loaded build manifest; loaded from settings otherwise
        debug: Overrides ``settings.debug``
    """
    settings = settings or Settings.from_env()
    if debug is not None:
        settings.debug = debug
    if root is None:
        root, default_props = _default_root()
        props = default_props if props is None else props
    if manifest is None:
        manifest = _load_manifest(settings)

    script: Optional[str] = None
    stylesheets: list = []
    if manifest is not None:
        try:
            entry = manifest.entry(settings.entry)
            script = manifest.asset_url(entry.file)
            stylesheets = [manifest.asset_url(css) for css in entry.css]
        except ManifestError as e:
            log.warning("%s; serving pages without client assets", e)

    async def index(request: Request) -> Response:
        try:
            app_html = render_to_string(root, props)
        except RenderError as e:
            log.exception("Server render failed (%s)", e.kind.value)
            return PlainTextResponse(e.message, status_code=500)

        page = render_document(
            app_html,
            script=script,
            stylesheets=stylesheets,
            title=settings.title,
            lang=settings.lang,
        )
        return HTMLResponse(page)

    async def health(request: Request) -> Response:
        return JSONResponse({"status": "ok"})

    routes = [
        Route("/", index, methods=["GET"]),
        Route("/api/health", health, methods=["GET"]),
    ]

    assets_dir = settings.dist_dir / "assets"
    if assets_dir.is_dir():
        routes.append(Mount("/assets", app=StaticFiles(directory=assets_dir), name="assets"))
    else:
        log.debug("No built assets at %s", assets_dir)

    app = Starlette(debug=settings.debug, routes=routes)
    app.state.settings = settings
    app.state.manifest = manifest
    return app
