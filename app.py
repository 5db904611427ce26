from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiohttp import web

from country_picker_bot.config import Config, load_config
from country_picker_bot.models.db import UserSettingsRepository
from country_picker_bot.routers.picker import get_picker_router
from country_picker_bot.services.catalog import CountryCatalog, default_catalog
from country_picker_bot.web.server import create_web_app

logging.basicConfig(level=logging.INFO)


def build_dispatcher(config: Config, repo: UserSettingsRepository, catalog: CountryCatalog) -> Dispatcher:
    dp = Dispatcher()
    dp.include_router(get_picker_router(config, repo, catalog))
    return dp


async def main() -> None:
    config = load_config()
    repo = UserSettingsRepository(config.db_path)
    await repo.init()
    catalog = default_catalog()
    bot = Bot(token=config.bot_token)
    dp = build_dispatcher(config, repo, catalog)
    web_app = create_web_app(catalog)
    runner = web.AppRunner(web_app)
    await runner.setup()
    site = web.TCPSite(runner, host=config.api_host, port=config.api_port)
    await site.start()
    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await runner.cleanup()
        await bot.session.close()


if __name__ == "__main__":
    asyncio.run(main())
