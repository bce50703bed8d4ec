#!/usr/bin/env python3
"""Command-line interface for the Quickets search service."""

import argparse
import logging
from typing import Optional

from . import config
from .search import QueryError, SearchCatalog

HELP = """Commands:
  /station <query>  - Search railway stations (e.g. /station bngalore)
  /train <query>    - Search trains by number or name (e.g. /train 12951)
  /city <query>     - Search bus cities (e.g. /city mysuru)
  /help             - Show this help
  /quit             - Exit the program"""


def print_banner():
    """Print the welcome banner."""
    print("""
╔═══════════════════════════════════════════════════════════╗
║              Quickets Search 🚆                           ║
║                                                           ║
║  Typo-tolerant lookup for stations, trains and cities.   ║
║  Type /help for the list of commands.                    ║
╚═══════════════════════════════════════════════════════════╝
""")


def _format_lines(rows: list[str]) -> str:
    return "\n".join(rows) if rows else "No matches found."


def handle_command(catalog: SearchCatalog, line: str) -> Optional[str]:
    """Run one prompt command and return the text to print.

    Returns None when the user asked to quit.
    """
    command, _, query = line.strip().partition(" ")
    command = command.lower()

    if command in ["/quit", "/exit", "/q"]:
        return None
    if command in ["/help", "/h", "?"]:
        return HELP

    try:
        if command == "/station":
            return _format_lines([
                f"{s.code:<6} {s.name} ({s.city})" for s in catalog.search_stations(query)
            ])
        if command == "/train":
            return _format_lines([
                f"{t.number:<6} {t.name}" for t in catalog.search_trains(query)
            ])
        if command in ["/city", "/cities"]:
            return _format_lines([
                f"{c.name}, {c.state} [{c.id}]" for c in catalog.search_cities(query)
            ])
    except QueryError:
        return f"Usage: {command} <query>"

    return f"Unknown command: {command}. Type /help for the list of commands."


def interactive(catalog: SearchCatalog):
    """Run the interactive search prompt."""
    print_banner()

    while True:
        try:
            user_input = input("\nSearch: ").strip()

            if not user_input:
                continue

            output = handle_command(catalog, user_input)
            if output is None:
                print("\nGoodbye! Happy journey! 🚆")
                break
            print(output)

        except (KeyboardInterrupt, EOFError):
            print("\n\nGoodbye! Happy journey! 🚆")
            break


def main(argv: Optional[list[str]] = None):
    """Entry point for the quickets-search command."""
    parser = argparse.ArgumentParser(description="Quickets station, train and city search")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API server")
    parser.add_argument("--host", default=config.HOST, help="Server bind address")
    parser.add_argument("--port", type=int, default=config.PORT, help="Server port")
    args = parser.parse_args(argv)

    if args.serve:
        from .api import run_server
        run_server(host=args.host, port=args.port)
        return

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    interactive(SearchCatalog.from_files())


if __name__ == "__main__":
    main()
