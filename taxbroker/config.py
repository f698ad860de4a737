import os
import marshmallow
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from taxbroker import errors


@dataclass
class Config:
    """Everything the bot needs from its environment to start up."""

    discord_token: str
    """token the bot logs in to discord with"""
    mongo_uri: str
    """connection uri of the mongodb server holding subscriptions"""
    mongo_username: str
    """database user"""
    mongo_password: str
    """database password"""


_REQUIRED = marshmallow.validate.Length(min=1)


class _ConfigSchema(marshmallow.Schema):
    """Loads a Config from environment variables."""

    class Meta:
        # The environment is full of variables that have nothing to do with us.
        unknown = marshmallow.EXCLUDE

    discord_token = marshmallow.fields.String(
        data_key="DISCORD_TOKEN", required=True, validate=_REQUIRED
    )
    mongo_uri = marshmallow.fields.String(
        data_key="MONGO_URI", load_default="mongodb://localhost:27017"
    )
    mongo_username = marshmallow.fields.String(
        data_key="MONGO_USERNAME", required=True, validate=_REQUIRED
    )
    mongo_password = marshmallow.fields.String(
        data_key="MONGO_PASSWORD", required=True, validate=_REQUIRED
    )

    @marshmallow.pre_load
    def strip_values(self, data: Mapping[str, Any], **kwargs: Any) -> Dict[str, Any]:
        # A variable set to whitespace counts as missing.
        return {
            key: value.strip() if isinstance(value, str) else value
            for key, value in data.items()
        }

    @marshmallow.post_load
    def make_config(self, data: Dict[str, Any], **kwargs: Any) -> Config:
        return Config(**data)


SCHEMA_CONFIG = _ConfigSchema()


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Load the bot's configuration.

    :param environ: the variables to read from. Defaults to ``os.environ``, which
        ``__main__`` populates from a .env file if there is one.

    :returns: the loaded configuration.

    :raises ConfigurationError: if a required value is missing or blank.
    """
    if environ is None:
        environ = os.environ

    try:
        config: Config = SCHEMA_CONFIG.load(dict(environ))
    except marshmallow.ValidationError as error:
        missing = ", ".join(sorted(str(key) for key in error.messages))
        raise errors.ConfigurationError(
            f"configuration is missing or invalid: {missing}"
        ) from error

    return config
