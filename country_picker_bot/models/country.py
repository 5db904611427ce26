from __future__ import annotations

import re
import warnings
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

WORLD_WIDE_CODE = "WW"
WORLD_WIDE_FLAG = "🌍"

_WHITESPACE = re.compile(r"\s+")

# dataset key, expected type, required
_FIELDS: Tuple[Tuple[str, type, bool], ...] = (
    ("e164_cc", str, True),
    ("iso2_cc", str, True),
    ("e164_sc", int, True),
    ("geographic", bool, True),
    ("level", int, True),
    ("name", str, True),
    ("example", str, True),
    ("display_name", str, True),
    ("full_example_with_plus_sign", str, False),
    ("display_name_no_e164_cc", str, True),
    ("e164_key", str, True),
)


class DatasetError(ValueError):
    """Raised when a dataset entry is missing a field or has a wrong type."""


def country_key(country: "CountryRecord") -> str:
    return country.country_code


def normalize_localized_name(value: str) -> str:
    return _WHITESPACE.sub(" ", value)


def flag_emoji(code: str) -> str:
    code = code.upper()
    if code == WORLD_WIDE_CODE or len(code) != 2 or not code.isalpha():
        return WORLD_WIDE_FLAG
    base = 127397
    return "".join(chr(base + ord(char)) for char in code)


def _check_field(entry: Mapping[str, Any], key: str, expected: type, required: bool) -> Any:
    if key not in entry or entry[key] is None:
        if required:
            raise DatasetError(f"Country entry {entry.get('iso2_cc', '?')!r} is missing field {key!r}")
        return None
    value = entry[key]
    wrong_type = not isinstance(value, expected)
    if expected is int and isinstance(value, bool):
        wrong_type = True
    if wrong_type:
        raise DatasetError(
            f"Country entry {entry.get('iso2_cc', '?')!r} field {key!r} "
            f"must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True, slots=True, eq=False)
class CountryRecord:
    phone_code: str
    country_code: str
    e164_sc: int
    geographic: bool
    level: int
    name: str
    example: str
    display_name: str
    display_name_no_country_code: str
    e164_key: str
    full_example_with_plus_sign: Optional[str] = None
    name_localized: Optional[str] = None

    @classmethod
    def from_json(cls, entry: Mapping[str, Any]) -> "CountryRecord":
        values = {key: _check_field(entry, key, expected, required) for key, expected, required in _FIELDS}
        return cls(
            phone_code=values["e164_cc"],
            country_code=values["iso2_cc"],
            e164_sc=values["e164_sc"],
            geographic=values["geographic"],
            level=values["level"],
            name=values["name"],
            example=values["example"],
            display_name=values["display_name"],
            display_name_no_country_code=values["display_name_no_e164_cc"],
            e164_key=values["e164_key"],
            full_example_with_plus_sign=values["full_example_with_plus_sign"],
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "e164_cc": self.phone_code,
            "iso2_cc": self.country_code,
            "e164_sc": self.e164_sc,
            "geographic": self.geographic,
            "level": self.level,
            "name": self.name,
            "nameLocalized": self.name_localized,
            "example": self.example,
            "display_name": self.display_name,
            "full_example_with_plus_sign": self.full_example_with_plus_sign,
            "display_name_no_e164_cc": self.display_name_no_country_code,
            "e164_key": self.e164_key,
        }

    def localized(self, localized_name: Optional[str]) -> "CountryRecord":
        """Return a copy carrying the localized name, falling back to the English one."""
        if localized_name is None:
            return replace(self, name_localized=self.name)
        return replace(self, name_localized=normalize_localized_name(localized_name))

    @property
    def display_name_localized(self) -> str:
        return self.name_localized if self.name_localized is not None else self.name

    @property
    def display_name_no_e164_cc(self) -> str:
        warnings.warn(
            "display_name_no_e164_cc is deprecated, use display_name_no_country_code",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.display_name_no_country_code

    @property
    def is_world_wide(self) -> bool:
        return self.country_code == WORLD_WIDE_CODE

    @property
    def flag_emoji(self) -> str:
        return flag_emoji(self.country_code)

    def starts_with(self, query: str) -> bool:
        """Case-insensitive prefix match on phone code, names and country code."""
        lowered = query.lower()
        if lowered.startswith("+"):
            lowered = lowered.replace("+", "")
        lowered = lowered.strip()
        if not lowered:
            return True
        return (
            self.phone_code.startswith(lowered)
            or self.name.lower().startswith(lowered)
            or self.country_code.lower().startswith(lowered)
            or self.display_name_localized.lower().startswith(lowered)
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CountryRecord):
            return country_key(other) == country_key(self)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(country_key(self))

    def __repr__(self) -> str:
        return (
            f"CountryRecord(country_code={self.country_code!r}, name={self.name!r}, "
            f"name_localized={self.name_localized!r})"
        )


WORLD_WIDE = CountryRecord(
    phone_code="",
    country_code=WORLD_WIDE_CODE,
    e164_sc=-1,
    geographic=False,
    level=-1,
    name="World Wide",
    example="",
    display_name="World Wide (WW)",
    display_name_no_country_code="World Wide",
    e164_key="",
)
