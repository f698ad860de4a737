import marshmallow
from typing import Any, Dict

from taxbroker import models

from ._fields import WorldNameField


class World(marshmallow.Schema):
    """A single entry from universalis' world list. We only care about the name."""

    class Meta:
        unknown = marshmallow.EXCLUDE

    name = WorldNameField(required=True, validate=marshmallow.validate.Length(min=1))


# The tax rate endpoint returns a bare mapping of location name to percentage, so a
# lone Dict field does the work rather than a full schema.
TAX_RATES_FIELD = marshmallow.fields.Dict(
    keys=marshmallow.fields.String(),
    values=marshmallow.fields.Integer(
        validate=marshmallow.validate.Range(min=0, max=100)
    ),
)


class Subscription(marshmallow.Schema):
    """Schema for serializing and deserializing subscription documents."""

    class Meta:
        # mongo adds an '_id' field we don't need
        unknown = marshmallow.EXCLUDE

    guild_id = marshmallow.fields.Integer(required=True)
    server = WorldNameField(load_default=None, allow_none=True)
    channel_id = marshmallow.fields.Integer(load_default=None, allow_none=True)
    message_id = marshmallow.fields.Integer(load_default=None, allow_none=True)

    @marshmallow.post_load
    def make_subscription(
        self, data: Dict[str, Any], **kwargs: Any
    ) -> models.Subscription:
        return models.Subscription(**data)
