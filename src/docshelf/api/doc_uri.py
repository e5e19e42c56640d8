"""Reverse lookup endpoint from route names to documentation URIs."""

from aiohttp import web

from docshelf.app_keys import route_mapping_key
from docshelf.core.types import URLPath


def create_doc_uri_routes() -> list[web.RouteDef]:
    return [web.get("/api/doc-uri/{route}", get_doc_uri)]


def doc_uri_for_request(request: web.Request) -> URLPath | None:
    """Look up documentation for the route that matched a request.

    Args:
        request: Request whose matched resource name is the route identifier

    Returns:
        Documentation URI, None for unnamed routes or unmapped names
    """
    route_mapping = request.app[route_mapping_key]
    return route_mapping.resolve_route(request.match_info.route.name)


async def get_doc_uri(request: web.Request) -> web.Response:
    route = request.match_info["route"]
    uri = request.app[route_mapping_key].resolve_route(route)
    if uri is None:
        return web.json_response(
            {"error": "No documentation for route", "route": route},
            status=404,
        )
    return web.json_response({"route": route, "uri": uri})
