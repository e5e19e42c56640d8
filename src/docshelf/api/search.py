"""Search endpoint."""

import logging

from aiohttp import web

from docshelf.api.pages import PAGE_ROUTE_NAME
from docshelf.app_keys import breadcrumbs_key, search_engine_key, templates_key
from docshelf.core.errors import InvalidQueryError
from docshelf.core.search import validate_query

logger = logging.getLogger(__name__)

SEARCH_ROUTE_NAME = "doc_search"


def create_search_routes() -> list[web.RouteDef]:
    return [
        web.get("/search", get_search, name=SEARCH_ROUTE_NAME),
    ]


async def get_search(request: web.Request) -> web.Response:
    try:
        query = validate_query(request.query.get("query"))
    except InvalidQueryError as e:
        logger.info(f"Rejected search request: {e}")
        location = request.app.router[PAGE_ROUTE_NAME].url_for(path="")
        raise web.HTTPFound(location.with_query(error="invalid-query")) from e

    documents = request.app[search_engine_key].search(query)
    breadcrumbs = request.app[breadcrumbs_key].for_search()
    html = request.app[templates_key].render_search(documents, query, breadcrumbs)
    return web.Response(text=html, content_type="text/html")
