import logging
import marshmallow
import motor.motor_asyncio
import motor.core
import pymongo
from typing import Optional, Dict, Any, List

from taxbroker import constants, models, schemas
from taxbroker.config import Config


# The schema used to serialize and deserialize the Subscription model.
SCHEMA_SUBSCRIPTION = schemas.Subscription(unknown=marshmallow.EXCLUDE)


# Types Aliases for mypy
_QueryType = Dict[str, Any]


def _query_guild_id(guild_id: int) -> _QueryType:
    """Return a base query for a specific guild id."""
    return {"guild_id": guild_id}


class _Collections:
    """
    Houses the motor collection objects for asynchronously accessing data in mongodb.
    """

    def __init__(self, db: motor.core.AgnosticDatabase) -> None:
        """
        :param db: the motor database object.
        """
        self.subscriptions: motor.core.AgnosticCollection = db[
            constants.SUBSCRIPTIONS_COLLECTION
        ]

    async def make_indexes(self) -> None:
        """Generate indexes for the mongo db collections."""
        # Each guild gets exactly one subscription. Marking the index unique keeps an
        # odd race between two setup commands from leaving us with a duplicate.
        await self.subscriptions.create_index(
            [("guild_id", pymongo.ASCENDING)], unique=True, name="guild_id"
        )


class DBConnection:
    """Adapter used to fetch and store subscriptions in our mongodb database."""

    def __init__(self) -> None:
        self.client: Optional[motor.core.AgnosticClient] = None
        """Client object"""
        self.db: Optional[motor.core.AgnosticDatabase] = None
        """Database object"""
        self.collections: Optional[_Collections] = None
        """Collections object"""

    async def connect(self, config: Config) -> None:
        """
        Connect to the database. Generates indexes if this is the first time.

        :param config: bot configuration holding the connection uri and credentials.
        """
        self.client = motor.motor_asyncio.AsyncIOMotorClient(
            config.mongo_uri,
            username=config.mongo_username,
            password=config.mongo_password,
        )
        self.db = self.client[constants.DB_NAME]
        self.collections = _Collections(self.db)

        # Make indexes on the db. This has no effect if the indexes are already set up.
        await self.collections.make_indexes()

    def close(self) -> None:
        """Close the underlying client, if we have one."""
        if self.client is not None:
            self.client.close()
            self.client = None

    async def upsert_subscription(
        self, subscription: models.Subscription
    ) -> models.Subscription:
        """
        Save a guild's subscription, replacing any subscription it already had.

        :param subscription: the subscription to save.

        :returns: the stored subscription.
        """
        assert self.collections is not None

        query = _query_guild_id(subscription.guild_id)
        document = SCHEMA_SUBSCRIPTION.dump(subscription)

        stored = await self.collections.subscriptions.find_one_and_update(
            query,
            {"$set": document},
            upsert=True,
            return_document=pymongo.ReturnDocument.AFTER,
        )

        result = SCHEMA_SUBSCRIPTION.load(stored)
        assert isinstance(result, models.Subscription)

        return result

    async def fetch_subscription(
        self, guild_id: int
    ) -> Optional[models.Subscription]:
        """
        Fetch a guild's subscription.

        :param guild_id: discord id of the guild.

        :returns: the subscription, or ``None`` if the guild has not set one up.
        """
        assert self.collections is not None

        document = await self.collections.subscriptions.find_one(
            _query_guild_id(guild_id)
        )
        if document is None:
            return None

        return SCHEMA_SUBSCRIPTION.load(document)

    async def fetch_subscriptions(self) -> List[models.Subscription]:
        """
        Fetch every subscription.

        Documents that fail validation are logged and left out.

        The whole cursor is read before returning, so a guild re-running setup while
        the caller works through the list can't cause entries to be skipped.
        """
        assert self.collections is not None

        cursor = self.collections.subscriptions.find({})
        documents = await cursor.to_list(length=None)

        subscriptions: List[models.Subscription] = list()
        for document in documents:
            # One corrupt document shouldn't hide every other guild from the caller.
            try:
                subscriptions.append(SCHEMA_SUBSCRIPTION.load(document))
            except marshmallow.ValidationError as error:
                logging.warning(
                    f"skipping unreadable subscription {document.get('_id')!r}:"
                    f" {error.messages}"
                )

        return subscriptions
