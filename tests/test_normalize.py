"""Tests for text normalization."""

from quickets_search.normalize import (
    build_search_text,
    normalize,
    strip_train_suffixes,
    strip_vowels,
)


def test_normalize_uppercases_and_trims():
    assert normalize("  new   delhi\t") == "NEW DELHI"


def test_normalize_rewrites_city_aliases():
    """Both alternate spellings map to one canonical name."""
    assert normalize("Bangalore") == "BENGALURU"
    assert normalize("banglore city") == "BENGALURU CITY"
    assert normalize("Bangalore") == normalize("Banglore")


def test_normalize_aliases_whole_words_only():
    assert normalize("Bangaloreans") == "BANGALOREANS"


def test_normalize_none_is_empty():
    assert normalize(None) == ""
    assert normalize("") == ""


def test_normalize_is_idempotent():
    once = normalize(" bangalore  cantonment ")
    assert normalize(once) == once


def test_strip_vowels():
    assert strip_vowels("BENGALURU CITY") == "BNGLR CTY"
    assert strip_vowels("NDLS") == "NDLS"


def test_strip_train_suffixes():
    """Generic words are dropped, the identifying part of the name stays."""
    assert strip_train_suffixes("KARNATAKA EXPRESS") == "KARNATAKA"
    assert strip_train_suffixes("CHENNAI BENGALURU SF EXPRESS") == "CHENNAI BENGALURU"
    assert strip_train_suffixes("HOWRAH CHENNAI MAIL") == "HOWRAH CHENNAI"
    assert strip_train_suffixes("YESVANTPUR ERNAKULAM SPL") == "YESVANTPUR ERNAKULAM"
    assert strip_train_suffixes("GARIB RATH EXP") == "GARIB RATH"


def test_strip_train_suffixes_leaves_longer_words():
    assert strip_train_suffixes("EXPRESSWAY SHUTTLE") == "EXPRESSWAY SHUTTLE"


def test_build_search_text_skips_empty_parts():
    assert build_search_text("MYSURU", "", "MYSR") == "MYSURU MYSR"
