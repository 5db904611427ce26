from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from country_picker_bot.data.country_codes import COUNTRY_CODES
from country_picker_bot.models.country import WORLD_WIDE, CountryRecord, country_key

logger = logging.getLogger(__name__)


class CountryNotFoundError(LookupError):
    """Raised when a code matches neither the catalog nor the World Wide entry."""

    def __init__(self, code: str) -> None:
        super().__init__(f"{code} is not a valid country code")
        self.code = code


class CountryCatalog:
    def __init__(self, entries: Iterable[Mapping[str, Any]] = COUNTRY_CODES) -> None:
        self._countries: List[CountryRecord] = [CountryRecord.from_json(entry) for entry in entries]
        self._by_code: Dict[str, CountryRecord] = {}
        for country in self._countries:
            self._by_code.setdefault(country_key(country), country)
        logger.info("Loaded %d country entries (%d distinct codes)", len(self._countries), len(self._by_code))

    def __len__(self) -> int:
        return len(self._countries)

    @property
    def world_wide(self) -> CountryRecord:
        return WORLD_WIDE

    def load_all(self) -> List[CountryRecord]:
        return list(self._countries)

    def find_by_codes(self, codes: Sequence[str]) -> List[CountryRecord]:
        wanted = {code.upper() for code in codes}
        result: List[CountryRecord] = []
        seen = set()
        for country in self._countries:
            key = country_key(country)
            if key in wanted and key not in seen:
                seen.add(key)
                result.append(country)
        return result

    def try_parse(self, code: str) -> Optional[CountryRecord]:
        normalized = code.strip().upper()
        if normalized == WORLD_WIDE.country_code:
            return WORLD_WIDE
        return self._by_code.get(normalized)

    def parse(self, code: str) -> CountryRecord:
        country = self.try_parse(code)
        if country is None:
            raise CountryNotFoundError(code)
        return country


@lru_cache(maxsize=1)
def default_catalog() -> CountryCatalog:
    return CountryCatalog()
