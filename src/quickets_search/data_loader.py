"""Loaders for the static station, train and city JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .models import City, Station, Train

logger = logging.getLogger(__name__)


class DataFormatError(Exception):
    """A data file is missing, unreadable or does not have the expected shape."""


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DataFormatError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DataFormatError(f"{path.name} is not valid JSON: {e}") from e


def _records(path: Path, document: Any, key: Optional[str] = None) -> list[dict]:
    """Pull the record array out of a document and check every entry is an object.

    Args:
        path: File the document came from, used in error messages
        document: Parsed JSON
        key: Top-level key holding the array, or None for a bare array
    """
    if key is not None:
        expected = f"{{ {key}: [] }}"
        if not isinstance(document, dict):
            raise DataFormatError(f"{path.name} format invalid: expected {expected}")
        document = document.get(key)
    else:
        expected = "[]"

    if not isinstance(document, list):
        raise DataFormatError(f"{path.name} format invalid: expected {expected}")

    for position, record in enumerate(document):
        if not isinstance(record, dict):
            raise DataFormatError(
                f"{path.name} format invalid: entry {position} is not an object"
            )
    return document


def _text(record: dict, field: str) -> str:
    value = record.get(field)
    return "" if value is None else str(value)


def load_stations(path: Path) -> list[Station]:
    """Load stations from a ``{"stations": [{stnCode, stnName, stnCity}]}`` document."""
    path = Path(path)
    raw = _records(path, _read_json(path), "stations")
    stations = [
        Station.from_source(
            code=_text(s, "stnCode"),
            name=_text(s, "stnName"),
            city=_text(s, "stnCity"),
        )
        for s in raw
    ]
    logger.info("Stations loaded: %d", len(stations))
    return stations


def load_trains(path: Path) -> list[Train]:
    """Load trains from a ``{"trains": [{number, name}]}`` document.

    Numbers may be stored as JSON numbers; they are kept as strings so that
    substring matching on partial numbers works.
    """
    path = Path(path)
    raw = _records(path, _read_json(path), "trains")
    trains = [
        Train.from_source(number=_text(t, "number"), name=_text(t, "name"))
        for t in raw
    ]
    logger.info("Trains loaded: %d", len(trains))
    return trains


def _city_id(path: Path, position: int, record: dict):
    """Return the record id, which must be a JSON string or integer."""
    value = record.get("id")
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise DataFormatError(
            f"{path.name} format invalid: entry {position} id must be a string or integer"
        )
    return value


def load_cities(path: Path) -> list[City]:
    """Load bus cities from a bare ``[{id, name, state}]`` array."""
    path = Path(path)
    raw = _records(path, _read_json(path))
    cities = [
        City.from_source(
            id=_city_id(path, position, c),
            name=_text(c, "name"),
            state=_text(c, "state"),
        )
        for position, c in enumerate(raw)
    ]
    logger.info("Cities loaded: %d", len(cities))
    return cities
