import datetime
import pytest
import pytz
from typing import Dict

from taxbroker import db, models
from taxbroker.db._connection import _Collections

from zdevelop.tests.fakes import FakeCollection, FakeRatesClient


@pytest.fixture()
def base_now() -> datetime.datetime:
    """A wednesday afternoon. The next reset is saturday 2024-05-18 07:00 UTC."""
    return pytz.utc.localize(datetime.datetime(2024, 5, 15, 12, 30))


@pytest.fixture()
def base_reset() -> datetime.datetime:
    """The reset following base_now."""
    return pytz.utc.localize(datetime.datetime(2024, 5, 18, 7, 0))


@pytest.fixture()
def city_rates() -> Dict[str, int]:
    """A realistic week of rates, with two cities tied for cheapest."""
    return {
        "Limsa Lominsa": 3,
        "Gridania": 3,
        "Ul'dah": 7,
        "Ishgard": 5,
        "Kugane": 5,
        "Crystarium": 5,
        "Old Sharlayan": 5,
        "Tuliyollal": 5,
    }


@pytest.fixture()
def worlds() -> models.WorldRegistry:
    return models.WorldRegistry(["Exodus", "Leviathan", "Famfrit"])


@pytest.fixture()
def rates_client(city_rates: Dict[str, int]) -> FakeRatesClient:
    return FakeRatesClient(
        worlds=["exodus", "leviathan", "famfrit"],
        rates={"exodus": city_rates, "leviathan": city_rates, "famfrit": city_rates},
    )


@pytest.fixture()
def subscriptions_collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture()
def taxdb(subscriptions_collection: FakeCollection) -> db.DBConnection:
    """
    A database connection wired to an in-memory collection, so we can inspect what was
    written after a transaction.
    """
    connection = db.DBConnection()
    connection.collections = _Collections({"subscriptions": subscriptions_collection})
    return connection
