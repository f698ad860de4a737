import asyncio
import logging
import aiohttp
import marshmallow
from typing import Any, Dict, Optional, Tuple

from taxbroker import constants, models, schemas


SCHEMA_WORLDS = schemas.World(many=True)

# Everything that can go wrong between asking universalis for data and having it
# validated. Json decode errors are ValueErrors.
_FETCH_ERRORS = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    ValueError,
    marshmallow.ValidationError,
)


class TaxRateClient:
    """
    Thin async wrapper around the universalis endpoints we need.

    Neither fetch method raises on a failed request. Universalis being down or slow
    should degrade our reports, not crash them, so failures are logged and come back as
    empty results. An empty world list means "we don't know", not "there are no
    servers".
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str = constants.UNIVERSALIS_API_URL,
        timeout: float = constants.HTTP_TIMEOUT_SECONDS,
    ) -> None:
        """
        :param session: the http session to make requests with. Owned by the caller.
        :param base_url: root url of the universalis api.
        :param timeout: total seconds any single request may take.
        """
        self.session: aiohttp.ClientSession = session
        self.base_url: str = base_url.rstrip("/")
        self.timeout: aiohttp.ClientTimeout = aiohttp.ClientTimeout(total=timeout)

    async def _get_json(
        self, path: str, params: Optional[Dict[str, str]] = None
    ) -> Any:
        url = self.base_url + path
        async with self.session.get(url, params=params, timeout=self.timeout) as resp:
            resp.raise_for_status()
            return await resp.json()

    async def fetch_worlds(self) -> Tuple[str, ...]:
        """
        Fetch the names of every server universalis knows about.

        :returns: lower-case server names in the order universalis lists them, with
            duplicates dropped. Empty if the request failed.
        """
        try:
            payload = await self._get_json(constants.UNIVERSALIS_WORLDS_PATH)
            worlds = SCHEMA_WORLDS.load(payload)
        except _FETCH_ERRORS as error:
            logging.warning(f"could not fetch world list: {error!r}")
            return tuple()

        # dict keys keep the first occurrence of each name, in order
        return tuple(dict.fromkeys(world["name"] for world in worlds))

    async def fetch_tax_rates(self, server: str) -> models.TaxRates:
        """
        Fetch the current tax rates for a server.

        :param server: the server name. Escaped for the query string by aiohttp.

        :returns: the server's tax rates. Empty if the request failed.
        """
        server = server.lower()
        try:
            payload = await self._get_json(
                constants.UNIVERSALIS_TAX_RATES_PATH, params={"world": server}
            )
            rates = schemas.TAX_RATES_FIELD.deserialize(payload)
        except _FETCH_ERRORS as error:
            logging.warning(f"could not fetch tax rates for '{server}': {error!r}")
            return models.TaxRates(server=server)

        return models.TaxRates(server=server, rates=rates)
