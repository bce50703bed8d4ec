"""Shared fixtures: a small, hand-picked station/train/city catalog."""

import pytest

from quickets_search.models import City, Station, Train
from quickets_search.search import SearchCatalog


@pytest.fixture
def stations():
    return [
        Station.from_source("SBC", "Bangalore City", "Bangalore"),
        Station.from_source("YPR", "Yesvantpur Jn", "Bangalore"),
        Station.from_source("MAS", "MGR Chennai Central", "Chennai"),
        Station.from_source("MYS", "Mysore Jn", "Mysuru"),
        Station.from_source("CBE", "Coimbatore Jn", "Coimbatore"),
        Station.from_source("ERS", "Ernakulam Jn", "Kochi"),
        Station.from_source("HWH", "Howrah Jn", "Kolkata"),
        Station.from_source("PUNE", "Pune Jn", "Pune"),
        Station.from_source("NDLS", "New Delhi", "Delhi"),
    ]


@pytest.fixture
def trains():
    return [
        Train.from_source("12952", "Mumbai Rajdhani Express"),
        Train.from_source("12951", "Mumbai Rajdhani Express"),
        Train.from_source("12301", "Howrah Rajdhani Express"),
        Train.from_source("12627", "Karnataka Express"),
        Train.from_source("22666", "Uday Express"),
        Train.from_source("12839", "Howrah Chennai Mail"),
    ]


@pytest.fixture
def cities():
    return [
        City.from_source(1, "Bangalore", "Karnataka"),
        City.from_source(2, "Mysuru", "Karnataka"),
        City.from_source(3, "Mangaluru", "Karnataka"),
        City.from_source(4, "Chennai", "Tamil Nadu"),
        City.from_source("hyd-7", "Hyderabad", "Telangana"),
    ]


@pytest.fixture
def catalog(stations, trains, cities):
    return SearchCatalog(stations=stations, trains=trains, cities=cities)
