from __future__ import annotations

import logging
from contextlib import suppress
from typing import Dict, Optional

from aiogram import Bot, F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from country_picker_bot.config import Config
from country_picker_bot.keyboards.picker import PickerCallback, clamp_page, picker_keyboard, picker_text
from country_picker_bot.models.country import CountryRecord
from country_picker_bot.models.db import UserSettingsRepository
from country_picker_bot.services.catalog import CountryCatalog
from country_picker_bot.services.filtering import PickerSession
from country_picker_bot.states.picker import PickerStates
from country_picker_bot.texts.catalog import TEXTS
from country_picker_bot.texts.countries import COUNTRY_LOCALIZATIONS, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

CLEAR_QUERY = "-"


def selection_text(country: CountryRecord, language: str, show_phone_code: bool) -> str:
    if show_phone_code and not country.is_world_wide:
        return TEXTS.get(
            "picker.selected.phone",
            language,
            flag=country.flag_emoji,
            name=country.display_name_localized,
            phone=country.phone_code,
        )
    return TEXTS.get("picker.selected", language, flag=country.flag_emoji, name=country.display_name_localized)


def get_picker_router(
    config: Config,
    repo: UserSettingsRepository,
    catalog: CountryCatalog,
    sessions: Optional[Dict[int, PickerSession]] = None,
) -> Router:
    router = Router(name="picker")
    router.message.filter(F.chat.type == "private")
    filter_config = config.filter_configuration()
    if sessions is None:
        sessions = {}

    async def get_language(state: FSMContext, user_id: int) -> str:
        data = await state.get_data()
        lang = data.get("lang")
        if lang:
            return lang
        stored = await repo.get_language(user_id)
        if stored:
            lang = stored
        else:
            lang = config.default_language
            await repo.set_language(user_id, lang)
        await state.update_data(lang=lang)
        return lang

    async def drop_keyboard(bot: Bot, chat_id: int, message_id: Optional[int]) -> None:
        if message_id is None:
            return
        with suppress(TelegramBadRequest):
            await bot.edit_message_reply_markup(chat_id=chat_id, message_id=message_id, reply_markup=None)

    async def close_session(state: FSMContext, user_id: int) -> None:
        sessions.pop(user_id, None)
        await state.set_state(None)
        await state.update_data(page=0, picker_message_id=None)

    @router.message(CommandStart())
    @router.message(Command("help"))
    async def start(message: Message, state: FSMContext) -> None:
        lang = await get_language(state, message.from_user.id)
        await message.answer(TEXTS.get("help.text", lang))

    @router.message(Command("lang"))
    async def switch_language(message: Message, state: FSMContext) -> None:
        current = await get_language(state, message.from_user.id)
        index = SUPPORTED_LANGUAGES.index(current) if current in SUPPORTED_LANGUAGES else 0
        language = SUPPORTED_LANGUAGES[(index + 1) % len(SUPPORTED_LANGUAGES)]
        await repo.set_language(message.from_user.id, language)
        await state.update_data(lang=language)
        sessions.pop(message.from_user.id, None)
        await message.answer(TEXTS.get("lang.updated", language))

    @router.message(Command("country"))
    async def open_picker(message: Message, state: FSMContext) -> None:
        user_id = message.from_user.id
        lang = await get_language(state, user_id)
        data = await state.get_data()
        await drop_keyboard(message.bot, message.chat.id, data.get("picker_message_id"))

        session = PickerSession(catalog, filter_config, COUNTRY_LOCALIZATIONS.localizer(lang))
        session.load()
        sessions[user_id] = session
        sent = await message.answer(
            picker_text(session, lang),
            reply_markup=picker_keyboard(session, lang, page=0, page_size=config.page_size),
        )
        await state.set_state(PickerStates.BROWSING)
        await state.update_data(page=0, picker_message_id=sent.message_id)

    @router.message(Command("cancel"))
    async def cancel(message: Message, state: FSMContext) -> None:
        lang = await get_language(state, message.from_user.id)
        data = await state.get_data()
        await drop_keyboard(message.bot, message.chat.id, data.get("picker_message_id"))
        await close_session(state, message.from_user.id)
        await message.answer(TEXTS.get("picker.closed", lang))

    @router.message(PickerStates.BROWSING, F.text)
    async def search(message: Message, state: FSMContext) -> None:
        user_id = message.from_user.id
        lang = await get_language(state, user_id)
        session = sessions.get(user_id)
        if session is None:
            await state.set_state(None)
            await message.answer(TEXTS.get("picker.expired", lang))
            return
        if not session.config.show_search:
            return
        query = (message.text or "").strip()
        if query == CLEAR_QUERY:
            query = ""
        session.search(query)

        data = await state.get_data()
        await drop_keyboard(message.bot, message.chat.id, data.get("picker_message_id"))
        sent = await message.answer(
            picker_text(session, lang),
            reply_markup=picker_keyboard(session, lang, page=0, page_size=config.page_size),
        )
        await state.update_data(page=0, picker_message_id=sent.message_id)

    @router.callback_query(PickerCallback.filter())
    async def on_picker_callback(callback: CallbackQuery, callback_data: PickerCallback, state: FSMContext) -> None:
        user_id = callback.from_user.id
        lang = await get_language(state, user_id)
        if callback_data.action == "noop":
            await callback.answer()
            return

        session = sessions.get(user_id)
        if session is None:
            await callback.answer(TEXTS.get("picker.expired", lang), show_alert=True)
            return

        if callback_data.action == "page":
            page = clamp_page(callback_data.page, len(session.displayed), config.page_size)
            await callback.message.edit_reply_markup(
                reply_markup=picker_keyboard(session, lang, page=page, page_size=config.page_size)
            )
            await state.update_data(page=page)
            await callback.answer()
        elif callback_data.action == "close":
            await close_session(state, user_id)
            await callback.message.edit_text(TEXTS.get("picker.closed", lang))
            await callback.answer()
        elif callback_data.action == "sel":
            result = session.select(callback_data.code, callback_data.key)
            if not result.selected:
                await callback.answer(TEXTS.get("picker.unavailable", lang), show_alert=True)
                return
            logger.info("User %s picked %s", user_id, result.country.country_code)
            await close_session(state, user_id)
            await callback.message.edit_text(
                selection_text(result.country, lang, session.config.show_phone_code)
            )
            await callback.answer()
        else:
            await callback.answer()

    return router
