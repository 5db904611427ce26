import unittest

from country_picker_bot.services.catalog import CountryCatalog
from country_picker_bot.services.filtering import (
    COMPARATORS,
    FilterConfiguration,
    PickerSession,
    PickerState,
    build_country_list,
    filter_countries,
)
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


US = make_entry("1", "US", "United States")
GB = make_entry("44", "GB", "United Kingdom")
FR = make_entry("33", "FR", "France")
DO_1809 = make_entry("1809", "DO", "Dominican Republic")
DO_1829 = make_entry("1829", "DO", "Dominican Republic")


def codes(countries):
    return [country.country_code for country in countries]


class FilterConfigurationTests(unittest.TestCase):
    def test_exclude_and_country_filter_are_mutually_exclusive(self):
        with self.assertRaises(ValueError):
            FilterConfiguration(exclude=frozenset({"GB"}), country_filter=frozenset({"US"}))

    def test_codes_are_normalized(self):
        config = FilterConfiguration(exclude=["gb", " us "], favorite=["fr", "de"])

        self.assertEqual(config.exclude, frozenset({"GB", "US"}))
        self.assertEqual(config.favorite, ("FR", "DE"))
        self.assertIsNone(config.country_filter)


class BuildCountryListTests(unittest.TestCase):
    def test_exclude_with_world_wide(self):
        catalog = CountryCatalog([US, GB])
        session = PickerSession(catalog, FilterConfiguration(exclude=["GB"], show_world_wide=True))

        self.assertEqual(codes(session.displayed), ["WW", "US"])

    def test_country_filter_keeps_only_listed_codes(self):
        catalog = CountryCatalog([US, GB, FR])

        listing = build_country_list(catalog, FilterConfiguration(country_filter=["FR", "US", "XX"]))

        self.assertEqual(codes(listing.countries), ["US", "FR"])

    def test_unknown_exclude_codes_are_ignored(self):
        catalog = CountryCatalog([US, GB])

        listing = build_country_list(catalog, FilterConfiguration(exclude=["XX"]))

        self.assertEqual(codes(listing.countries), ["US", "GB"])

    def test_dedup_keeps_first_entry_when_phone_code_hidden(self):
        catalog = CountryCatalog([DO_1809, US, DO_1829])

        listing = build_country_list(catalog, FilterConfiguration(show_phone_code=False))

        self.assertEqual(codes(listing.countries), ["DO", "US"])
        self.assertEqual(listing.countries[0].phone_code, "1809")

    def test_duplicates_kept_when_phone_code_shown(self):
        catalog = CountryCatalog([DO_1809, US, DO_1829])

        listing = build_country_list(catalog, FilterConfiguration(show_phone_code=True))

        self.assertEqual(codes(listing.countries), ["DO", "US", "DO"])
        self.assertEqual([c.phone_code for c in listing.countries], ["1809", "1", "1829"])

    def test_favorites_drop_unknown_codes(self):
        catalog = CountryCatalog([US, GB])

        listing = build_country_list(catalog, FilterConfiguration(favorite=["GB", "XX"]))

        self.assertEqual(codes(listing.favorites), ["GB"])
        self.assertEqual(codes(listing.countries), ["US", "GB"])

    def test_favorites_follow_catalog_order_not_caller_order(self):
        catalog = CountryCatalog([US, GB, FR])

        listing = build_country_list(catalog, FilterConfiguration(favorite=["FR", "US"]))

        self.assertEqual(codes(listing.favorites), ["US", "FR"])

    def test_favorites_are_not_subject_to_exclusion(self):
        catalog = CountryCatalog([US, GB])

        listing = build_country_list(catalog, FilterConfiguration(exclude=["GB"], favorite=["GB"]))

        self.assertEqual(codes(listing.favorites), ["GB"])
        self.assertEqual(codes(listing.countries), ["US"])

    def test_empty_favorites_is_noop(self):
        catalog = CountryCatalog([US, GB])

        listing = build_country_list(catalog, FilterConfiguration(favorite=[]))

        self.assertEqual(listing.favorites, [])

    def test_comparator_sorts_by_name_descending(self):
        catalog = CountryCatalog([FR, US, GB])

        listing = build_country_list(catalog, FilterConfiguration(comparator=COMPARATORS["name_desc"]))

        self.assertEqual(codes(listing.countries), ["US", "GB", "FR"])

    def test_comparator_runs_after_localization(self):
        catalog = CountryCatalog([US, GB, FR])
        localize = COUNTRY_LOCALIZATIONS.localizer("ru")

        listing = build_country_list(catalog, FilterConfiguration(comparator=COMPARATORS["localized"]), localize)

        # Великобритания, Соединённые Штаты, Франция
        self.assertEqual(codes(listing.countries), ["GB", "US", "FR"])

    def test_sort_happens_before_dedup(self):
        catalog = CountryCatalog([DO_1809, DO_1829])
        descending_phone = lambda a, b: COMPARATORS["phone"](b, a)  # noqa: E731

        listing = build_country_list(catalog, FilterConfiguration(comparator=descending_phone))

        self.assertEqual([c.phone_code for c in listing.countries], ["1829"])

    def test_records_are_localized(self):
        catalog = CountryCatalog([US, FR])

        listing = build_country_list(
            catalog,
            FilterConfiguration(show_world_wide=True),
            COUNTRY_LOCALIZATIONS.localizer("ru"),
        )

        self.assertEqual([c.name_localized for c in listing.countries], ["Соединённые Штаты", "Франция"])
        self.assertEqual(listing.world_wide.name_localized, "Весь мир")

    def test_missing_translation_falls_back_to_english(self):
        catalog = CountryCatalog([US])

        listing = build_country_list(catalog, FilterConfiguration(), COUNTRY_LOCALIZATIONS.localizer("de"))

        self.assertEqual(listing.countries[0].name_localized, "United States")


class FilterCountriesTests(unittest.TestCase):
    def setUp(self):
        catalog = CountryCatalog([US, GB, FR, DO_1809])
        self.countries = build_country_list(catalog, FilterConfiguration()).countries

    def test_empty_query_returns_list_unchanged(self):
        self.assertEqual(codes(filter_countries(self.countries, "")), ["US", "GB", "FR", "DO"])

    def test_plus_prefix_is_ignored(self):
        self.assertEqual(
            codes(filter_countries(self.countries, "+1")),
            codes(filter_countries(self.countries, "1")),
        )
        self.assertEqual(codes(filter_countries(self.countries, "1")), ["US", "DO"])

    def test_name_and_code_prefix(self):
        self.assertEqual(codes(filter_countries(self.countries, "fr")), ["FR"])
        self.assertEqual(codes(filter_countries(self.countries, "united")), ["US", "GB"])
        self.assertEqual(codes(filter_countries(self.countries, "g")), ["GB"])

    def test_no_match(self):
        self.assertEqual(filter_countries(self.countries, "zz"), [])

    def test_is_idempotent(self):
        once = filter_countries(self.countries, "u")
        twice = filter_countries(once, "u")

        self.assertEqual(codes(once), codes(twice))


class PickerSessionTests(unittest.TestCase):
    def setUp(self):
        self.catalog = CountryCatalog([US, GB, FR])
        self.config = FilterConfiguration(favorite=["GB"], show_world_wide=True)

    def test_load_runs_once(self):
        calls = []

        def localize(code):
            calls.append(code)
            return None

        session = PickerSession(self.catalog, self.config, localize)
        self.assertIs(session.state, PickerState.UNINITIALIZED)

        session.load()
        first_count = len(calls)
        session.load()
        session.displayed

        self.assertIs(session.state, PickerState.IDLE)
        self.assertEqual(len(calls), first_count)

    def test_search_toggles_state_and_hides_favorites(self):
        session = PickerSession(self.catalog, self.config)
        self.assertTrue(session.show_favorites)
        self.assertEqual(codes(session.favorites), ["GB"])

        results = session.search("fr")

        self.assertIs(session.state, PickerState.SEARCHING)
        self.assertEqual(codes(results), ["FR"])
        self.assertFalse(session.show_favorites)
        self.assertEqual(session.favorites, [])

        session.search("")

        self.assertIs(session.state, PickerState.IDLE)
        self.assertTrue(session.show_favorites)
        self.assertEqual(codes(session.displayed), ["WW", "US", "GB", "FR"])

    def test_search_excludes_world_wide(self):
        session = PickerSession(self.catalog, self.config)

        self.assertEqual(codes(session.search("w")), [])

    def test_favorites_never_shown_without_configuration(self):
        session = PickerSession(self.catalog, FilterConfiguration())

        self.assertFalse(session.show_favorites)

    def test_select_returns_result(self):
        session = PickerSession(self.catalog, self.config)

        result = session.select("fr")

        self.assertTrue(result.selected)
        self.assertEqual(result.country.country_code, "FR")
        self.assertEqual(session.select("WW").country.country_code, "WW")

    def test_select_outside_displayed_list(self):
        session = PickerSession(self.catalog, self.config)
        session.search("fr")

        self.assertFalse(session.select("US").selected)
        self.assertFalse(session.select("XX").selected)
        self.assertIsNone(session.select("XX").country)

    def test_select_distinguishes_phone_variants(self):
        catalog = CountryCatalog([US, DO_1809, DO_1829])
        session = PickerSession(catalog, FilterConfiguration(show_phone_code=True))

        self.assertEqual(session.select("DO", "1829-DO-0").country.phone_code, "1829")
        self.assertEqual(session.select("DO").country.phone_code, "1809")
        self.assertFalse(session.select("DO", "1849-DO-0").selected)


if __name__ == "__main__":
    unittest.main()
