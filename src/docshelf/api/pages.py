"""Documentation page endpoint.

Serves raw files as-is and renders Markdown pages and directory listings
through the page template.
"""

from aiohttp import web

from docshelf.app_keys import breadcrumbs_key, resolver_key, templates_key
from docshelf.core.documents import RawFile
from docshelf.core.errors import PageNotFoundError

PAGE_ROUTE_NAME = "doc_page"

# Messages shown for ?error=<code> after a redirect
ERROR_MESSAGES = {
    "invalid-query": "Invalid search term",
}


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/docs/{path:.*}", get_page, name=PAGE_ROUTE_NAME),
    ]


async def get_page(request: web.Request) -> web.StreamResponse:
    path = request.match_info["path"]
    resolver = request.app[resolver_key]

    try:
        document = resolver.resolve(path)
    except PageNotFoundError as e:
        raise web.HTTPNotFound(text=e.message) from e

    if isinstance(document, RawFile):
        return web.FileResponse(document.absolute_path)

    breadcrumbs = request.app[breadcrumbs_key].for_page(path)
    error = ERROR_MESSAGES.get(request.query.get("error", ""))
    html = request.app[templates_key].render_page(document, breadcrumbs, error=error)
    return web.Response(text=html, content_type="text/html")
