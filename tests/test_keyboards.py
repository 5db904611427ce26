import unittest

from country_picker_bot.keyboards.picker import (
    DIVIDER,
    PickerCallback,
    country_label,
    page_count,
    picker_keyboard,
    picker_text,
)
from country_picker_bot.services.catalog import CountryCatalog
from country_picker_bot.services.filtering import FilterConfiguration, PickerSession
from country_picker_bot.texts.countries import COUNTRY_LOCALIZATIONS


def make_entry(phone: str, code: str, name: str):
    return {
        "e164_cc": phone,
        "iso2_cc": code,
        "e164_sc": 0,
        "geographic": True,
        "level": 1,
        "name": name,
        "example": "123456",
        "display_name": f"{name} ({code}) [+{phone}]",
        "display_name_no_e164_cc": f"{name} ({code})",
        "e164_key": f"{phone}-{code}-0",
    }


CATALOG = CountryCatalog(
    [
        make_entry("1", "US", "United States"),
        make_entry("44", "GB", "United Kingdom"),
        make_entry("33", "FR", "France"),
    ]
)


def button_texts(markup):
    return [[button.text for button in row] for row in markup.inline_keyboard]


class PickerKeyboardTests(unittest.TestCase):
    def test_single_page_lists_countries_and_close_button(self):
        session = PickerSession(CATALOG, FilterConfiguration())

        markup = picker_keyboard(session, "en", page_size=8)

        self.assertEqual(
            button_texts(markup),
            [["🇺🇸 United States"], ["🇬🇧 United Kingdom"], ["🇫🇷 France"], ["❌ Close"]],
        )
        self.assertEqual(markup.inline_keyboard[0][0].callback_data, "cp:sel:US:1-US-0:0")

    def test_paging_adds_navigation_row(self):
        session = PickerSession(CATALOG, FilterConfiguration())

        first = picker_keyboard(session, "en", page=0, page_size=2)
        second = picker_keyboard(session, "en", page=1, page_size=2)

        self.assertEqual(button_texts(first)[2], ["·", "1/2", "▶️"])
        self.assertEqual(button_texts(second), [["🇫🇷 France"], ["◀️", "2/2", "·"], ["❌ Close"]])
        next_data = PickerCallback.unpack(first.inline_keyboard[2][2].callback_data)
        self.assertEqual((next_data.action, next_data.page), ("page", 1))

    def test_page_is_clamped(self):
        session = PickerSession(CATALOG, FilterConfiguration())

        markup = picker_keyboard(session, "en", page=10, page_size=2)

        self.assertEqual(button_texts(markup)[0], ["🇫🇷 France"])

    def test_favorites_on_first_page_only(self):
        session = PickerSession(CATALOG, FilterConfiguration(favorite=["FR"]))

        first = button_texts(picker_keyboard(session, "en", page=0, page_size=2))
        second = button_texts(picker_keyboard(session, "en", page=1, page_size=2))

        self.assertEqual(first[:3], [["⭐ Favorites"], ["🇫🇷 France"], [DIVIDER]])
        self.assertNotIn(["⭐ Favorites"], second)

    def test_favorites_hidden_while_searching(self):
        session = PickerSession(CATALOG, FilterConfiguration(favorite=["FR"]))
        session.search("united")

        texts = button_texts(picker_keyboard(session, "en"))

        self.assertEqual(texts, [["🇺🇸 United States"], ["🇬🇧 United Kingdom"], ["❌ Close"]])

    def test_localized_labels(self):
        session = PickerSession(CATALOG, FilterConfiguration(show_world_wide=True), COUNTRY_LOCALIZATIONS.localizer("ru"))

        texts = button_texts(picker_keyboard(session, "ru"))

        self.assertEqual(texts[0], ["🌍 Весь мир"])
        self.assertEqual(texts[-1], ["❌ Закрыть"])

    def test_phone_variant_buttons_select_the_tapped_row(self):
        session = PickerSession(CountryCatalog(), FilterConfiguration(show_phone_code=True, country_filter=["DO"]))
        markup = picker_keyboard(session, "en")

        tapped = PickerCallback.unpack(markup.inline_keyboard[2][0].callback_data)
        result = session.select(tapped.code, tapped.key)

        self.assertEqual(markup.inline_keyboard[2][0].text, "🇩🇴 +1849 Dominican Republic")
        self.assertEqual(result.country.phone_code, "1849")


class CountryLabelTests(unittest.TestCase):
    def test_phone_code_shown_except_for_world_wide(self):
        config = FilterConfiguration(show_phone_code=True, show_world_wide=True)
        session = PickerSession(CATALOG, config)
        world_wide, united_states = session.displayed[:2]

        self.assertEqual(country_label(united_states, config), "🇺🇸 +1 United States")
        self.assertEqual(country_label(world_wide, config), "🌍 World Wide")

    def test_label_builder_overrides_rendering(self):
        config = FilterConfiguration(label_builder=lambda country: f"[{country.country_code}]")
        session = PickerSession(CATALOG, config)

        self.assertEqual(button_texts(picker_keyboard(session, "en"))[0], ["[US]"])


class PickerTextTests(unittest.TestCase):
    def test_search_summary(self):
        session = PickerSession(CATALOG, FilterConfiguration())
        session.search("united")

        self.assertIn("Results for “united”: 2", picker_text(session, "en"))

    def test_empty_result_hint(self):
        session = PickerSession(CATALOG, FilterConfiguration())
        session.search("zz")

        self.assertIn("Nothing found for “zz”", picker_text(session, "en"))

    def test_search_hint_hidden_when_search_disabled(self):
        session = PickerSession(CATALOG, FilterConfiguration(show_search=False))

        self.assertEqual(picker_text(session, "en"), "🌍 Select a country")


class PageCountTests(unittest.TestCase):
    def test_page_count(self):
        self.assertEqual(page_count(0, 8), 1)
        self.assertEqual(page_count(8, 8), 1)
        self.assertEqual(page_count(9, 8), 2)


if __name__ == "__main__":
    unittest.main()
