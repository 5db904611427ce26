from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from country_picker_bot.services.filtering import COMPARATORS, FilterConfiguration

TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(raw: Optional[str], default: bool = False) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUE_VALUES


def _parse_codes(raw: Optional[str]) -> Optional[List[str]]:
    if raw is None or not raw.strip():
        return None
    items: List[str] = []
    for chunk in raw.split(","):
        code = chunk.strip().upper()
        if len(code) == 2 and code.isalpha():
            items.append(code)
    return items


def _parse_int(raw: Optional[str], default: int) -> int:
    try:
        return int(raw) if raw is not None else default
    except ValueError:
        return default


@dataclass(slots=True)
class Config:
    bot_token: str
    db_path: str
    default_language: str
    show_phone_code: bool
    exclude: Optional[List[str]]
    country_filter: Optional[List[str]]
    favorite: Optional[List[str]]
    show_world_wide: bool
    show_search: bool
    sort: Optional[str]
    page_size: int
    api_host: str
    api_port: int

    def filter_configuration(self) -> FilterConfiguration:
        return FilterConfiguration(
            show_phone_code=self.show_phone_code,
            exclude=frozenset(self.exclude) if self.exclude is not None else None,
            country_filter=frozenset(self.country_filter) if self.country_filter is not None else None,
            favorite=tuple(self.favorite) if self.favorite is not None else None,
            show_world_wide=self.show_world_wide,
            show_search=self.show_search,
            comparator=COMPARATORS.get(self.sort) if self.sort else None,
        )


def load_config() -> Config:
    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN environment variable is not set")

    db_path = os.getenv("DB_URL") or os.getenv("BOT_DB_PATH", "./picker.db")
    if db_path.startswith("sqlite+"):
        db_path = db_path.split("sqlite+", maxsplit=1)[-1]
    if db_path.startswith("aiosqlite:///"):
        db_path = db_path[len("aiosqlite:///"):]

    default_lang = os.getenv("BOT_DEFAULT_LANG", "en").lower()
    if default_lang not in {"en", "ru"}:
        default_lang = "en"

    exclude = _parse_codes(os.getenv("PICKER_EXCLUDE"))
    country_filter = _parse_codes(os.getenv("PICKER_COUNTRY_FILTER"))
    if exclude is not None and country_filter is not None:
        raise ValueError("PICKER_EXCLUDE and PICKER_COUNTRY_FILTER cannot both be set")

    sort = (os.getenv("PICKER_SORT") or "").strip().lower() or None
    if sort is not None and sort not in COMPARATORS:
        sort = None

    page_size = _parse_int(os.getenv("PICKER_PAGE_SIZE"), 8)
    if page_size < 1:
        page_size = 8

    return Config(
        bot_token=token,
        db_path=db_path,
        default_language=default_lang,
        show_phone_code=_parse_bool(os.getenv("PICKER_SHOW_PHONE_CODE")),
        exclude=exclude,
        country_filter=country_filter,
        favorite=_parse_codes(os.getenv("PICKER_FAVORITE")),
        show_world_wide=_parse_bool(os.getenv("PICKER_SHOW_WORLD_WIDE")),
        show_search=_parse_bool(os.getenv("PICKER_SHOW_SEARCH"), default=True),
        sort=sort,
        page_size=page_size,
        api_host=os.getenv("API_HOST", "0.0.0.0"),
        api_port=_parse_int(os.getenv("API_PORT"), 8080),
    )
