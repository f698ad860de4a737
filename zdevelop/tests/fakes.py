import asyncio
import aiohttp
import discord
import pytest
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock

from taxbroker import models


def mark_test(test: Callable) -> Callable:
    """
    We have a couple of decorators we want to apply to all of our async tests, so we
    will use this decorator to apply them all
    """
    test = pytest.mark.asyncio(test)
    # Nothing here talks to a real network, so anything slower than this is a hang.
    test = pytest.mark.timeout(5)(test)
    return test


def not_found(text: str = "Unknown Message") -> discord.NotFound:
    """Build the error discord.py raises for a deleted channel or message."""
    return discord.NotFound(MagicMock(status=404, reason="Not Found"), text)


class FakeResponse:
    """Stands in for an aiohttp response used as an async context manager."""

    def __init__(
        self,
        payload: Any = None,
        status: int = 200,
        enter_error: Optional[BaseException] = None,
    ) -> None:
        self.payload: Any = payload
        self.status: int = status
        self.enter_error: Optional[BaseException] = enter_error

    async def __aenter__(self) -> "FakeResponse":
        if self.enter_error is not None:
            raise self.enter_error
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                request_info=MagicMock(), history=(), status=self.status
            )

    async def json(self) -> Any:
        if isinstance(self.payload, BaseException):
            raise self.payload
        return self.payload


class FakeSession:
    """
    Stands in for an aiohttp session. Responses are keyed by url, plus the world query
    param for tax rate requests.
    """

    def __init__(self, responses: Mapping[str, FakeResponse]) -> None:
        self.responses: Dict[str, FakeResponse] = dict(responses)
        self.requests: List[Tuple[str, Optional[Dict[str, str]], Any]] = list()

    def get(
        self, url: str, params: Optional[Dict[str, str]] = None, timeout: Any = None
    ) -> FakeResponse:
        self.requests.append((url, params, timeout))

        key = url
        if params:
            key = f"{url}?world={params['world']}"

        try:
            return self.responses[key]
        except KeyError:
            return FakeResponse(status=404)


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]) -> None:
        self.documents: List[Dict[str, Any]] = documents

    async def to_list(self, length: Optional[int]) -> List[Dict[str, Any]]:
        return list(self.documents)


class FakeCollection:
    """Just enough of a motor collection for DBConnection."""

    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = list()
        self.indexes: List[Tuple[Any, Dict[str, Any]]] = list()

    @staticmethod
    def _matches(document: Mapping[str, Any], query: Mapping[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in query.items())

    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        self.indexes.append((keys, kwargs))
        return kwargs.get("name", "")

    async def find_one(self, query: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if self._matches(document, query):
                return dict(document)
        return None

    async def find_one_and_update(
        self,
        query: Mapping[str, Any],
        update: Mapping[str, Any],
        upsert: bool = False,
        return_document: Any = None,
    ) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if self._matches(document, query):
                document.update(update.get("$set", {}))
                return dict(document)

        if not upsert:
            return None

        document = {"_id": len(self.documents) + 1, **query, **update.get("$set", {})}
        self.documents.append(document)
        return dict(document)

    def find(self, query: Mapping[str, Any]) -> FakeCursor:
        return FakeCursor(
            [dict(d) for d in self.documents if self._matches(d, query)]
        )


class FakeRatesClient:
    """Stands in for TaxRateClient, serving canned rates and recording requests."""

    def __init__(
        self,
        worlds: Iterable[str] = (),
        rates: Optional[Mapping[str, Mapping[str, int]]] = None,
        delays: Optional[Mapping[str, float]] = None,
    ) -> None:
        self.worlds: Tuple[str, ...] = tuple(worlds)
        self.rates: Dict[str, Mapping[str, int]] = dict(rates or {})
        self.delays: Dict[str, float] = dict(delays or {})
        self.fetched: List[str] = list()
        self.world_fetches: int = 0

    async def fetch_worlds(self) -> Tuple[str, ...]:
        self.world_fetches += 1
        return self.worlds

    async def fetch_tax_rates(self, server: str) -> models.TaxRates:
        self.fetched.append(server)
        delay = self.delays.get(server)
        if delay:
            await asyncio.sleep(delay)
        return models.TaxRates(server=server, rates=dict(self.rates.get(server, {})))


def fake_message(channel_id: int, message_id: int) -> MagicMock:
    message = MagicMock()
    message.id = message_id
    message.channel.id = channel_id
    message.edit = AsyncMock()
    return message


class FakeMessenger:
    """Resolves (channel id, message id) pairs from a dict. Missing pairs are gone."""

    def __init__(self, known: Mapping[Tuple[int, int], MagicMock]) -> None:
        self.known: Dict[Tuple[int, int], MagicMock] = dict(known)

    async def fetch_message(
        self, channel_id: int, message_id: int
    ) -> Optional[MagicMock]:
        return self.known.get((channel_id, message_id))
