"""Station, train and city records held by the search indexes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .normalize import (
    build_search_text,
    normalize,
    strip_train_suffixes,
    strip_vowels,
)

CityId = Union[int, str]


@dataclass(frozen=True)
class Station:
    """Represents a railway station."""
    code: str
    name: str
    city: str
    search_text: str

    @classmethod
    def from_source(cls, code: str, name: str, city: str) -> Station:
        """Build a station from the raw stations.json fields."""
        name = normalize(name)
        city = normalize(city)
        return cls(
            code=code.strip().upper(),
            name=name,
            city=city,
            # code as it appears in the file, not the trimmed one
            search_text=build_search_text(
                name, city, strip_vowels(name), strip_vowels(city), code
            ),
        )

    def to_dict(self) -> dict:
        return {"code": self.code, "name": self.name, "city": self.city}


@dataclass(frozen=True)
class Train:
    """Represents a train service. Numbers are not unique across records."""
    number: str
    name: str
    tokens: str

    @classmethod
    def from_source(cls, number: str, name: str) -> Train:
        name = normalize(name)
        return cls(
            number=number.strip(),
            name=name,
            tokens=strip_train_suffixes(name),
        )

    def to_dict(self) -> dict:
        return {"number": self.number, "name": self.name}


@dataclass(frozen=True)
class City:
    """Represents a bus-serviceable city."""
    id: CityId
    name: str
    state: str
    search_text: str

    @classmethod
    def from_source(cls, id: CityId, name: str, state: str) -> City:
        name = normalize(name)
        state = normalize(state)
        return cls(
            id=id,
            name=name,
            state=state,
            search_text=build_search_text(
                name, state, strip_vowels(name), strip_vowels(state)
            ),
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "state": self.state}
