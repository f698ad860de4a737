import marshmallow
from typing import Optional, Mapping, Any


class WorldNameField(marshmallow.fields.String):
    """
    Server names are case-insensitive, so we normalize them to lower case as soon as
    they come in from universalis or the database.
    """

    def _deserialize(
        self,
        value: Any,
        attr: Optional[str],
        data: Optional[Mapping[str, Any]],
        **kwargs: Any,
    ) -> str:
        name = super()._deserialize(value, attr, data, **kwargs)
        return name.strip().lower()
