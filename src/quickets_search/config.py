"""Configuration settings for the Quickets search service."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = Path(os.getenv("QUICKETS_DATA_DIR", PROJECT_ROOT / "data"))
STATIONS_FILE = Path(os.getenv("QUICKETS_STATIONS_FILE", DATA_DIR / "stations.json"))
TRAINS_FILE = Path(os.getenv("QUICKETS_TRAINS_FILE", DATA_DIR / "trains.json"))
CITIES_FILE = Path(os.getenv("QUICKETS_CITIES_FILE", DATA_DIR / "cities.json"))

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Search tuning
RESULT_LIMIT = 5
STATION_THRESHOLD = 0.4
TRAIN_THRESHOLD = 0.25  # train numbers are short, keep matching strict
CITY_THRESHOLD = 0.4

# Queries of 3-5 digits are treated as (partial) train numbers
TRAIN_NUMBER_PATTERN = r"[0-9]{3,5}"
