"""aiohttp server for Docshelf.

Application factory and route registration.
"""

import logging

from aiohttp import web

from docshelf.api.doc_uri import create_doc_uri_routes
from docshelf.api.pages import PAGE_ROUTE_NAME, create_pages_routes
from docshelf.api.search import SEARCH_ROUTE_NAME, create_search_routes
from docshelf.app_keys import (
    breadcrumbs_key,
    resolver_key,
    route_mapping_key,
    search_engine_key,
    templates_key,
)
from docshelf.config import Config
from docshelf.core.breadcrumbs import BreadcrumbBuilder, BreadcrumbItem
from docshelf.core.documents import DocumentFactory
from docshelf.core.renderer import MarkdownRenderer
from docshelf.core.resolver import DocumentResolver
from docshelf.core.routes import RouteMapping
from docshelf.core.search import SearchEngine
from docshelf.core.types import URLPath
from docshelf.templating import TemplateRenderer

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        ConfigurationError: If a route mapping pattern doesn't compile
    """
    app = web.Application()

    def url_for(key: str) -> URLPath:
        return URLPath(str(app.router[PAGE_ROUTE_NAME].url_for(path=key)))

    app.router.add_get("/", _redirect_to_docs)
    app.router.add_get("/docs", _redirect_to_docs)
    app.router.add_routes(create_search_routes())
    app.router.add_routes(create_doc_uri_routes())
    app.router.add_routes(create_pages_routes())

    search_path = str(app.router[SEARCH_ROUTE_NAME].url_for())
    route_mapping = RouteMapping(config.route_mapping, url_for)
    templates = TemplateRenderer(
        MarkdownRenderer(),
        doc_uri=route_mapping.resolve_route,
        search_path=search_path,
    )
    documents = DocumentFactory(config.docs.source_dir, url_for)

    home = BreadcrumbItem(title=config.home.title, path=_route_url(app, config.home.route))

    app[resolver_key] = DocumentResolver(documents, templates)
    app[search_engine_key] = SearchEngine(documents)
    app[route_mapping_key] = route_mapping
    app[templates_key] = templates
    app[breadcrumbs_key] = BreadcrumbBuilder(home, url_for, config.docs.source_dir, search_path)

    return app


async def _redirect_to_docs(request: web.Request) -> web.Response:
    raise web.HTTPFound(request.app.router[PAGE_ROUTE_NAME].url_for(path=""))


def _route_url(app: web.Application, route: str | None) -> str:
    """Return the URL of a named route, "/" if it isn't registered."""
    if route is None or route not in app.router:
        return "/"
    return str(app.router[route].url_for())


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving {config.docs.source_dir} on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port)
