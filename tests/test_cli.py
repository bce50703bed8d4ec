"""Tests for the interactive command handling."""

from quickets_search.cli import HELP, handle_command


def test_station_command(catalog):
    output = handle_command(catalog, "/station bngalore")
    assert "SBC" in output
    assert "BENGALURU CITY (BENGALURU)" in output


def test_train_command(catalog):
    output = handle_command(catalog, "/train 12951")
    assert output.split() == ["12951", "MUMBAI", "RAJDHANI", "EXPRESS"]


def test_city_command(catalog):
    assert handle_command(catalog, "/city mysuru").startswith("MYSURU, KARNATAKA [2]")


def test_command_without_query_shows_usage(catalog):
    assert handle_command(catalog, "/station") == "Usage: /station <query>"
    assert handle_command(catalog, "/train    ") == "Usage: /train <query>"


def test_no_matches(catalog):
    assert handle_command(catalog, "/station qqqqqq") == "No matches found."


def test_help_and_quit(catalog):
    assert handle_command(catalog, "/help") == HELP
    assert handle_command(catalog, "/quit") is None


def test_unknown_command(catalog):
    assert handle_command(catalog, "/route sbc mys").startswith("Unknown command: /route")
