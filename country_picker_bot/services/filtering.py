from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from country_picker_bot.models.country import WORLD_WIDE_CODE, CountryRecord, country_key
from country_picker_bot.services.catalog import CountryCatalog

logger = logging.getLogger(__name__)

Comparator = Callable[[CountryRecord, CountryRecord], int]
Localizer = Callable[[str], Optional[str]]
LabelBuilder = Callable[[CountryRecord], str]


def _no_localization(_: str) -> Optional[str]:
    return None


def _normalize_codes(codes: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    if codes is None:
        return None
    return tuple(code.strip().upper() for code in codes if code and code.strip())


@dataclass(frozen=True, slots=True)
class FilterConfiguration:
    show_phone_code: bool = False
    exclude: Optional[FrozenSet[str]] = None
    country_filter: Optional[FrozenSet[str]] = None
    favorite: Optional[Tuple[str, ...]] = None
    show_world_wide: bool = False
    show_search: bool = True
    search_autofocus: bool = False
    comparator: Optional[Comparator] = None
    label_builder: Optional[LabelBuilder] = None

    def __post_init__(self) -> None:
        if self.exclude is not None and self.country_filter is not None:
            raise ValueError("Cannot provide both exclude and country_filter")
        exclude = _normalize_codes(self.exclude)
        country_filter = _normalize_codes(self.country_filter)
        object.__setattr__(self, "exclude", frozenset(exclude) if exclude is not None else None)
        object.__setattr__(self, "country_filter", frozenset(country_filter) if country_filter is not None else None)
        object.__setattr__(self, "favorite", _normalize_codes(self.favorite))


def _compare_text(left: str, right: str) -> int:
    return (left > right) - (left < right)


COMPARATORS: Dict[str, Comparator] = {
    "name": lambda a, b: _compare_text(a.name.lower(), b.name.lower()),
    "name_desc": lambda a, b: _compare_text(b.name.lower(), a.name.lower()),
    "localized": lambda a, b: _compare_text(a.display_name_localized.lower(), b.display_name_localized.lower()),
    "phone": lambda a, b: _compare_text(a.phone_code.zfill(4), b.phone_code.zfill(4)),
}


@dataclass(slots=True)
class CountryListing:
    countries: List[CountryRecord]
    favorites: List[CountryRecord] = field(default_factory=list)
    world_wide: Optional[CountryRecord] = None

    def full_list(self) -> List[CountryRecord]:
        if self.world_wide is None:
            return list(self.countries)
        return [self.world_wide, *self.countries]


def unique_by_code(countries: Iterable[CountryRecord]) -> List[CountryRecord]:
    seen = set()
    result: List[CountryRecord] = []
    for country in countries:
        key = country_key(country)
        if key in seen:
            continue
        seen.add(key)
        result.append(country)
    return result


def build_country_list(
    catalog: CountryCatalog,
    config: FilterConfiguration,
    localize: Localizer = _no_localization,
) -> CountryListing:
    countries = [country.localized(localize(country.country_code)) for country in catalog.load_all()]

    # comparators may read the localized name, so sort only after localization
    if config.comparator is not None:
        countries.sort(key=cmp_to_key(config.comparator))

    if not config.show_phone_code:
        countries = unique_by_code(countries)

    if config.exclude is not None:
        countries = [country for country in countries if country_key(country) not in config.exclude]
    elif config.country_filter is not None:
        countries = [country for country in countries if country_key(country) in config.country_filter]

    favorites: List[CountryRecord] = []
    if config.favorite:
        # catalog order, not the order the caller listed the codes in
        favorites = [
            country.localized(localize(country.country_code))
            for country in catalog.find_by_codes(config.favorite)
        ]

    world_wide = None
    if config.show_world_wide:
        world_wide = catalog.world_wide.localized(localize(WORLD_WIDE_CODE))

    return CountryListing(countries=countries, favorites=favorites, world_wide=world_wide)


def filter_countries(countries: Iterable[CountryRecord], query: str) -> List[CountryRecord]:
    return [country for country in countries if country.starts_with(query)]


class PickerState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    IDLE = "idle"
    SEARCHING = "searching"


@dataclass(frozen=True, slots=True)
class SelectionResult:
    country: Optional[CountryRecord] = None

    @property
    def selected(self) -> bool:
        return self.country is not None


class PickerSession:
    """One open picker: builds the listing once, then answers search queries."""

    def __init__(
        self,
        catalog: CountryCatalog,
        config: FilterConfiguration,
        localize: Optional[Localizer] = None,
    ) -> None:
        self._catalog = catalog
        self._config = config
        self._localize = localize or _no_localization
        self._state = PickerState.UNINITIALIZED
        self._listing = CountryListing(countries=[])
        self._displayed: List[CountryRecord] = []
        self._query = ""

    @property
    def config(self) -> FilterConfiguration:
        return self._config

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def query(self) -> str:
        return self._query

    def load(self) -> None:
        if self._state is not PickerState.UNINITIALIZED:
            return
        self._listing = build_country_list(self._catalog, self._config, self._localize)
        self._displayed = self._listing.full_list()
        self._state = PickerState.IDLE
        logger.debug(
            "Picker loaded: %d countries, %d favorites, world wide=%s",
            len(self._listing.countries),
            len(self._listing.favorites),
            self._listing.world_wide is not None,
        )

    def search(self, query: str) -> List[CountryRecord]:
        self.load()
        self._query = query
        if query:
            self._state = PickerState.SEARCHING
            self._displayed = filter_countries(self._listing.countries, query)
        else:
            self._state = PickerState.IDLE
            self._displayed = self._listing.full_list()
        return list(self._displayed)

    @property
    def displayed(self) -> List[CountryRecord]:
        self.load()
        return list(self._displayed)

    @property
    def show_favorites(self) -> bool:
        self.load()
        return bool(self._listing.favorites) and self._state is not PickerState.SEARCHING

    @property
    def favorites(self) -> List[CountryRecord]:
        if not self.show_favorites:
            return []
        return list(self._listing.favorites)

    def select(self, code: str, variant: str = "") -> SelectionResult:
        """Return the tapped row; `variant` is the `e164_key` that tells phone variants apart."""
        self.load()
        code = code.strip().upper()
        for country in (*self.favorites, *self._displayed):
            if country_key(country) != code:
                continue
            if not variant or country.e164_key == variant:
                logger.debug("Country selected: %s", code)
                return SelectionResult(country)
        return SelectionResult()
