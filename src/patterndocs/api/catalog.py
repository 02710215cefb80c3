"""Catalog API endpoint."""

from aiohttp import web

from patterndocs.core.catalog import DESIGN_PATTERNS


def create_catalog_routes() -> list[web.RouteDef]:
    return [web.get("/api/catalog", get_catalog)]


async def get_catalog(request: web.Request) -> web.Response:
    return web.json_response(
        {"categories": [category.to_dict() for category in DESIGN_PATTERNS]}
    )
