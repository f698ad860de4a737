from dataclasses import dataclass
from typing import Optional


@dataclass
class Subscription:
    """A guild's standing request to have a tax rate message kept up to date."""

    guild_id: int
    """discord id of the guild that owns this subscription"""
    server: Optional[str] = None
    """lower-case name of the server to report on"""
    channel_id: Optional[int] = None
    """discord id of the channel the report message lives in"""
    message_id: Optional[int] = None
    """discord id of the report message we edit each week"""

    @property
    def is_complete(self) -> bool:
        """Whether we have everything needed to find and edit the report message."""
        return bool(self.server) and bool(self.channel_id) and bool(self.message_id)
