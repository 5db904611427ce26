from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from aiohttp import web

from country_picker_bot.config import TRUE_VALUES
from country_picker_bot.models.country import CountryRecord
from country_picker_bot.services.catalog import CountryCatalog
from country_picker_bot.services.filtering import COMPARATORS, FilterConfiguration, PickerSession
from country_picker_bot.texts.countries import COUNTRY_LOCALIZATIONS, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


def _flag(request: web.Request, name: str) -> bool:
    return request.query.get(name, "").strip().lower() in TRUE_VALUES


def _codes(request: web.Request, name: str) -> Optional[List[str]]:
    raw = request.query.get(name)
    if raw is None:
        return None
    return [chunk.strip().upper() for chunk in raw.split(",") if chunk.strip()]


def _language(request: web.Request) -> str:
    lang = request.query.get("lang", "en").lower()
    return lang if lang in SUPPORTED_LANGUAGES else "en"


def serialize_country(country: CountryRecord) -> Dict[str, Any]:
    payload = country.to_json()
    payload["flag"] = country.flag_emoji
    return payload


def build_filter_configuration(request: web.Request) -> FilterConfiguration:
    exclude = _codes(request, "exclude")
    country_filter = _codes(request, "filter")
    favorite = _codes(request, "favorite")
    sort = request.query.get("sort")
    if sort is not None and sort not in COMPARATORS:
        raise web.HTTPBadRequest(text="unsupported_sort")
    try:
        return FilterConfiguration(
            show_phone_code=_flag(request, "phone"),
            exclude=frozenset(exclude) if exclude is not None else None,
            country_filter=frozenset(country_filter) if country_filter is not None else None,
            favorite=tuple(favorite) if favorite is not None else None,
            show_world_wide=_flag(request, "world"),
            comparator=COMPARATORS[sort] if sort else None,
        )
    except ValueError as exc:
        raise web.HTTPBadRequest(text="exclude_and_filter") from exc


async def handle_countries(request: web.Request) -> web.Response:
    catalog: CountryCatalog = request.app["catalog"]
    config = build_filter_configuration(request)
    lang = _language(request)
    query = request.query.get("q", "")
    session = PickerSession(catalog, config, COUNTRY_LOCALIZATIONS.localizer(lang))
    countries = session.search(query)
    payload = {
        "query": query,
        "favorites": [serialize_country(country) for country in session.favorites],
        "countries": [serialize_country(country) for country in countries],
    }
    return web.json_response(payload)


async def handle_country(request: web.Request) -> web.Response:
    catalog: CountryCatalog = request.app["catalog"]
    code = request.match_info["code"]
    country = catalog.try_parse(code)
    if country is None:
        raise web.HTTPNotFound(
            text='{"error": "country_not_found"}',
            content_type="application/json",
        )
    localized = country.localized(COUNTRY_LOCALIZATIONS.country_name(country.country_code, _language(request)))
    return web.json_response(serialize_country(localized))


async def handle_health(request: web.Request) -> web.Response:
    catalog: CountryCatalog = request.app["catalog"]
    return web.json_response({"status": "ok", "countries": len(catalog)})


def create_web_app(catalog: CountryCatalog) -> web.Application:
    app = web.Application()
    app["catalog"] = catalog

    app.router.add_get("/health", handle_health)
    app.router.add_get("/api/countries", handle_countries)
    app.router.add_get("/api/countries/{code}", handle_country)

    @web.middleware
    async def cors_middleware(request: web.Request, handler):
        try:
            response = await handler(request)
        except web.HTTPException as exc:
            exc.headers.setdefault("Access-Control-Allow-Origin", "*")
            raise
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response

    app.middlewares.append(cors_middleware)
    logger.info("Web app configured with %d countries", len(catalog))
    return app
