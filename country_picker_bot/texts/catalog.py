from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(slots=True)
class TextCatalog:
    messages: Dict[str, Dict[str, str]]

    def get(self, key: str, language: str = "en", **kwargs: object) -> str:
        lang = language if language in self.messages else "en"
        template = self.messages.get(lang, {}).get(key)
        if template is None:
            template = self.messages.get("en", {}).get(key, key)
        return template.format(**kwargs)

    def button(self, key: str, language: str = "en") -> str:
        return self.get(key, language)


TEXTS = TextCatalog(
    messages={
        "en": {
            "search": "Search",
            "picker.title": "🌍 Select a country",
            "picker.search.hint": "Type a country name, code or phone code to search. Send - to clear the search.",
            "picker.search.results": "🔎 Results for “{query}”: {count}",
            "picker.search.empty": "Nothing found for “{query}”. Try another query or send - to clear it.",
            "picker.favorites": "⭐ Favorites",
            "picker.page": "{page}/{pages}",
            "picker.prev": "◀️",
            "picker.next": "▶️",
            "picker.close": "❌ Close",
            "picker.closed": "Country picker closed.",
            "picker.selected": "You selected {flag} {name}.",
            "picker.selected.phone": "You selected {flag} {name} (+{phone}).",
            "picker.expired": "This picker is no longer active. Send /country to open a new one.",
            "picker.unavailable": "This country is not in the list.",
            "help.text": "Commands:\n/country — open the country picker\n/cancel — close the picker\n/lang — switch language",
            "lang.updated": "Language switched to English.",
        },
        "ru": {
            "search": "Поиск",
            "picker.title": "🌍 Выберите страну",
            "picker.search.hint": "Введите название страны, её код или телефонный код для поиска. Отправьте -, чтобы сбросить поиск.",
            "picker.search.results": "🔎 Результаты по запросу «{query}»: {count}",
            "picker.search.empty": "По запросу «{query}» ничего не найдено. Попробуйте другой запрос или отправьте -.",
            "picker.favorites": "⭐ Избранное",
            "picker.page": "{page}/{pages}",
            "picker.prev": "◀️",
            "picker.next": "▶️",
            "picker.close": "❌ Закрыть",
            "picker.closed": "Выбор страны закрыт.",
            "picker.selected": "Вы выбрали: {flag} {name}.",
            "picker.selected.phone": "Вы выбрали: {flag} {name} (+{phone}).",
            "picker.expired": "Этот список больше не активен. Отправьте /country, чтобы открыть новый.",
            "picker.unavailable": "Этой страны нет в списке.",
            "help.text": "Команды:\n/country — выбрать страну\n/cancel — закрыть выбор\n/lang — сменить язык",
            "lang.updated": "Язык переключен на русский.",
        },
    }
)
