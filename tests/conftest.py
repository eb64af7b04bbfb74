"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from museum.domain import Exhibit, Museum, Patron


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_store():
    from museum.stores import default_store
    default_store.clear()
    yield
    default_store.clear()


@pytest.fixture
def dmns() -> Museum:
    return Museum("Denver Museum of Nature and Science")


@pytest.fixture
def gems_and_minerals() -> Exhibit:
    return Exhibit("Gems and Minerals", 0)


@pytest.fixture
def dead_sea_scrolls() -> Exhibit:
    return Exhibit("Dead Sea Scrolls", 10)


@pytest.fixture
def imax() -> Exhibit:
    return Exhibit("IMAX", 15)


@pytest.fixture
def stocked_dmns(dmns, gems_and_minerals, dead_sea_scrolls, imax) -> Museum:
    dmns.add_exhibit(gems_and_minerals)
    dmns.add_exhibit(dead_sea_scrolls)
    dmns.add_exhibit(imax)
    return dmns


@pytest.fixture
def bob() -> Patron:
    return Patron("Bob", 10)


@pytest.fixture
def sally() -> Patron:
    return Patron("Sally", 20)


@pytest.fixture
def tj() -> Patron:
    return Patron("TJ", 7)


@pytest.fixture
def morgan() -> Patron:
    return Patron("Morgan", 15)
