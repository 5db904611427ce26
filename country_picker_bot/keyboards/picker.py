from __future__ import annotations

from typing import Iterable, List, Sequence

from aiogram.filters.callback_data import CallbackData
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from country_picker_bot.models.country import CountryRecord
from country_picker_bot.services.filtering import FilterConfiguration, PickerSession
from country_picker_bot.texts.catalog import TEXTS

DIVIDER = "─────────"


class PickerCallback(CallbackData, prefix="cp"):
    action: str
    code: str = ""
    key: str = ""
    page: int = 0


def country_label(country: CountryRecord, config: FilterConfiguration) -> str:
    if config.label_builder is not None:
        return config.label_builder(country)
    parts = [country.flag_emoji]
    if config.show_phone_code and not country.is_world_wide:
        parts.append(f"+{country.phone_code}")
    parts.append(country.display_name_localized)
    return " ".join(parts)


def page_count(total: int, page_size: int) -> int:
    if total <= 0:
        return 1
    return (total + page_size - 1) // page_size


def clamp_page(page: int, total: int, page_size: int) -> int:
    return max(0, min(page, page_count(total, page_size) - 1))


def _build_rows(buttons: Iterable[InlineKeyboardButton], width: int = 1) -> List[List[InlineKeyboardButton]]:
    row: List[InlineKeyboardButton] = []
    rows: List[List[InlineKeyboardButton]] = []
    for button in buttons:
        row.append(button)
        if len(row) >= width:
            rows.append(row)
            row = []
    if row:
        rows.append(row)
    return rows


def _noop(text: str) -> InlineKeyboardButton:
    return InlineKeyboardButton(text=text, callback_data=PickerCallback(action="noop").pack())


def _country_buttons(countries: Sequence[CountryRecord], config: FilterConfiguration) -> List[InlineKeyboardButton]:
    return [
        InlineKeyboardButton(
            text=country_label(country, config),
            callback_data=PickerCallback(action="sel", code=country.country_code, key=country.e164_key).pack(),
        )
        for country in countries
    ]


def picker_keyboard(
    session: PickerSession,
    language: str,
    *,
    page: int = 0,
    page_size: int = 8,
) -> InlineKeyboardMarkup:
    config = session.config
    displayed = session.displayed
    page = clamp_page(page, len(displayed), page_size)
    pages = page_count(len(displayed), page_size)

    rows: List[List[InlineKeyboardButton]] = []
    if page == 0 and session.show_favorites:
        rows.append([_noop(TEXTS.button("picker.favorites", language))])
        rows.extend(_build_rows(_country_buttons(session.favorites, config)))
        rows.append([_noop(DIVIDER)])

    start = page * page_size
    rows.extend(_build_rows(_country_buttons(displayed[start : start + page_size], config)))

    if pages > 1:
        previous = (
            InlineKeyboardButton(
                text=TEXTS.button("picker.prev", language),
                callback_data=PickerCallback(action="page", page=page - 1).pack(),
            )
            if page > 0
            else _noop("·")
        )
        following = (
            InlineKeyboardButton(
                text=TEXTS.button("picker.next", language),
                callback_data=PickerCallback(action="page", page=page + 1).pack(),
            )
            if page < pages - 1
            else _noop("·")
        )
        indicator = _noop(TEXTS.get("picker.page", language, page=page + 1, pages=pages))
        rows.append([previous, indicator, following])

    rows.append(
        [
            InlineKeyboardButton(
                text=TEXTS.button("picker.close", language),
                callback_data=PickerCallback(action="close").pack(),
            )
        ]
    )
    return InlineKeyboardMarkup(inline_keyboard=rows)


def picker_text(session: PickerSession, language: str) -> str:
    lines = [TEXTS.get("picker.title", language)]
    if session.config.show_search:
        lines.append(TEXTS.get("picker.search.hint", language))
    if session.query:
        count = len(session.displayed)
        key = "picker.search.results" if count else "picker.search.empty"
        lines.append(TEXTS.get(key, language, query=session.query, count=count))
    return "\n\n".join(lines)
