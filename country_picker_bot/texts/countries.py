from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass(slots=True)
class CountryLocalizations:
    names: Dict[str, Dict[str, str]]

    def country_name(self, country_code: str, language: str = "en") -> Optional[str]:
        return self.names.get(language, {}).get(country_code.upper())

    def localizer(self, language: str) -> Callable[[str], Optional[str]]:
        def localize(country_code: str) -> Optional[str]:
            return self.country_name(country_code, language)

        return localize


COUNTRY_NAMES_RU: Dict[str, str] = {
    "WW": "Весь мир",
    "AF": "Афганистан",
    "AX": "Аландские острова",
    "AL": "Албания",
    "DZ": "Алжир",
    "AS": "Американское Самоа",
    "AD": "Андорра",
    "AO": "Ангола",
    "AI": "Ангилья",
    "AQ": "Антарктида",
    "AG": "Антигуа и Барбуда",
    "AR": "Аргентина",
    "AM": "Армения",
    "AW": "Аруба",
    "AC": "Остров Вознесения",
    "AU": "Австралия",
    "AT": "Австрия",
    "AZ": "Азербайджан",
    "BS": "Багамы",
    "BH": "Бахрейн",
    "BD": "Бангладеш",
    "BB": "Барбадос",
    "BY": "Беларусь",
    "BE": "Бельгия",
    "BZ": "Белиз",
    "BJ": "Бенин",
    "BM": "Бермудские острова",
    "BT": "Бутан",
    "BO": "Боливия",
    "BA": "Босния и Герцеговина",
    "BW": "Ботсвана",
    "BR": "Бразилия",
    "IO": "Британская территория в Индийском океане",
    "VG": "Британские Виргинские острова",
    "BN": "Бруней",
    "BG": "Болгария",
    "BF": "Буркина-Фасо",
    "BI": "Бурунди",
    "KH": "Камбоджа",
    "CM": "Камерун",
    "CA": "Канада",
    "CV": "Кабо-Верде",
    "BQ": "Карибские Нидерланды",
    "KY": "Острова Кайман",
    "CF": "Центральноафриканская Республика",
    "TD": "Чад",
    "CL": "Чили",
    "CN": "Китай",
    "CX": "Остров Рождества",
    "CC": "Кокосовые острова",
    "CO": "Колумбия",
    "KM": "Коморы",
    "CG": "Конго",
    "CD": "Демократическая Республика Конго",
    "CK": "Острова Кука",
    "CR": "Коста-Рика",
    "CI": "Кот-д’Ивуар",
    "HR": "Хорватия",
    "CU": "Куба",
    "CW": "Кюрасао",
    "CY": "Кипр",
    "CZ": "Чехия",
    "DK": "Дания",
    "DJ": "Джибути",
    "DM": "Доминика",
    "DO": "Доминиканская Республика",
    "EC": "Эквадор",
    "EG": "Египет",
    "SV": "Сальвадор",
    "GQ": "Экваториальная Гвинея",
    "ER": "Эритрея",
    "EE": "Эстония",
    "SZ": "Эсватини",
    "ET": "Эфиопия",
    "FK": "Фолклендские острова",
    "FO": "Фарерские острова",
    "FJ": "Фиджи",
    "FI": "Финляндия",
    "FR": "Франция",
    "GF": "Французская Гвиана",
    "PF": "Французская Полинезия",
    "GA": "Габон",
    "GM": "Гамбия",
    "GE": "Грузия",
    "DE": "Германия",
    "GH": "Гана",
    "GI": "Гибралтар",
    "GR": "Греция",
    "GL": "Гренландия",
    "GD": "Гренада",
    "GP": "Гваделупа",
    "GU": "Гуам",
    "GT": "Гватемала",
    "GG": "Гернси",
    "GN": "Гвинея",
    "GW": "Гвинея-Бисау",
    "GY": "Гайана",
    "HT": "Гаити",
    "HN": "Гондурас",
    "HK": "Гонконг",
    "HU": "Венгрия",
    "IS": "Исландия",
    "IN": "Индия",
    "ID": "Индонезия",
    "IR": "Иран",
    "IQ": "Ирак",
    "IE": "Ирландия",
    "IM": "Остров Мэн",
    "IL": "Израиль",
    "IT": "Италия",
    "JM": "Ямайка",
    "JP": "Япония",
    "JE": "Джерси",
    "JO": "Иордания",
    "KZ": "Казахстан",
    "KE": "Кения",
    "KI": "Кирибати",
    "XK": "Косово",
    "KW": "Кувейт",
    "KG": "Киргизия",
    "LA": "Лаос",
    "LV": "Латвия",
    "LB": "Ливан",
    "LS": "Лесото",
    "LR": "Либерия",
    "LY": "Ливия",
    "LI": "Лихтенштейн",
    "LT": "Литва",
    "LU": "Люксембург",
    "MO": "Макао",
    "MG": "Мадагаскар",
    "MW": "Малави",
    "MY": "Малайзия",
    "MV": "Мальдивы",
    "ML": "Мали",
    "MT": "Мальта",
    "MH": "Маршалловы Острова",
    "MQ": "Мартиника",
    "MR": "Мавритания",
    "MU": "Маврикий",
    "YT": "Майотта",
    "MX": "Мексика",
    "FM": "Микронезия",
    "MD": "Молдова",
    "MC": "Монако",
    "MN": "Монголия",
    "ME": "Черногория",
    "MS": "Монтсеррат",
    "MA": "Марокко",
    "MZ": "Мозамбик",
    "MM": "Мьянма",
    "NA": "Намибия",
    "NR": "Науру",
    "NP": "Непал",
    "NL": "Нидерланды",
    "NC": "Новая Каледония",
    "NZ": "Новая Зеландия",
    "NI": "Никарагуа",
    "NE": "Нигер",
    "NG": "Нигерия",
    "NU": "Ниуэ",
    "NF": "Остров Норфолк",
    "KP": "КНДР",
    "MK": "Северная Македония",
    "MP": "Северные Марианские острова",
    "NO": "Норвегия",
    "OM": "Оман",
    "PK": "Пакистан",
    "PW": "Палау",
    "PS": "Палестина",
    "PA": "Панама",
    "PG": "Папуа — Новая Гвинея",
    "PY": "Парагвай",
    "PE": "Перу",
    "PH": "Филиппины",
    "PN": "Острова Питкэрн",
    "PL": "Польша",
    "PT": "Португалия",
    "PR": "Пуэрто-Рико",
    "QA": "Катар",
    "RE": "Реюньон",
    "RO": "Румыния",
    "RU": "Россия",
    "RW": "Руанда",
    "BL": "Сен-Бартелеми",
    "SH": "Остров Святой Елены",
    "KN": "Сент-Китс и Невис",
    "LC": "Сент-Люсия",
    "MF": "Сен-Мартен",
    "PM": "Сен-Пьер и Микелон",
    "VC": "Сент-Винсент и Гренадины",
    "WS": "Самоа",
    "SM": "Сан-Марино",
    "ST": "Сан-Томе и Принсипи",
    "SA": "Саудовская Аравия",
    "SN": "Сенегал",
    "RS": "Сербия",
    "SC": "Сейшельские Острова",
    "SL": "Сьерра-Леоне",
    "SG": "Сингапур",
    "SX": "Синт-Мартен",
    "SK": "Словакия",
    "SI": "Словения",
    "SB": "Соломоновы Острова",
    "SO": "Сомали",
    "ZA": "Южно-Африканская Республика",
    "GS": "Южная Георгия и Южные Сандвичевы Острова",
    "KR": "Республика Корея",
    "SS": "Южный Судан",
    "ES": "Испания",
    "LK": "Шри-Ланка",
    "SD": "Судан",
    "SR": "Суринам",
    "SJ": "Шпицберген и Ян-Майен",
    "SE": "Швеция",
    "CH": "Швейцария",
    "SY": "Сирия",
    "TW": "Тайвань",
    "TJ": "Таджикистан",
    "TZ": "Танзания",
    "TH": "Таиланд",
    "TL": "Восточный Тимор",
    "TG": "Того",
    "TK": "Токелау",
    "TO": "Тонга",
    "TT": "Тринидад и Тобаго",
    "TA": "Тристан-да-Кунья",
    "TN": "Тунис",
    "TR": "Турция",
    "TM": "Туркменистан",
    "TC": "Острова Тёркс и Кайкос",
    "TV": "Тувалу",
    "VI": "Виргинские острова (США)",
    "UG": "Уганда",
    "UA": "Украина",
    "AE": "Объединённые Арабские Эмираты",
    "GB": "Великобритания",
    "US": "Соединённые Штаты",
    "UY": "Уругвай",
    "UZ": "Узбекистан",
    "VU": "Вануату",
    "VA": "Ватикан",
    "VE": "Венесуэла",
    "VN": "Вьетнам",
    "WF": "Уоллис и Футуна",
    "EH": "Западная Сахара",
    "YE": "Йемен",
    "ZM": "Замбия",
    "ZW": "Зимбабве",
}


COUNTRY_LOCALIZATIONS = CountryLocalizations(names={"ru": COUNTRY_NAMES_RU})

SUPPORTED_LANGUAGES = ("en", "ru")
