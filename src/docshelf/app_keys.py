"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docshelf.core.breadcrumbs import BreadcrumbBuilder
from docshelf.core.resolver import DocumentResolver
from docshelf.core.routes import RouteMapping
from docshelf.core.search import SearchEngine
from docshelf.templating import TemplateRenderer

resolver_key = web.AppKey("resolver", DocumentResolver)
search_engine_key = web.AppKey("search_engine", SearchEngine)
route_mapping_key = web.AppKey("route_mapping", RouteMapping)
templates_key = web.AppKey("templates", TemplateRenderer)
breadcrumbs_key = web.AppKey("breadcrumbs", BreadcrumbBuilder)
