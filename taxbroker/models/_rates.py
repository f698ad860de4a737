from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple


@dataclass
class TaxRates:
    """Market tax rates for a single server at a single point in time."""

    server: str
    """lower-case name of the server these rates belong to"""
    rates: Dict[str, int] = field(default_factory=dict)
    """tax percentage for each market location, in the order the api returned them"""

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self.rates.items())

    def __len__(self) -> int:
        return len(self.rates)

    @property
    def is_empty(self) -> bool:
        """``True`` if we have no rate data for this server."""
        return not self.rates

    @property
    def lowest_rate(self) -> int:
        """
        The lowest tax rate across all locations.

        :raises ValueError: if there are no rates to compare.
        """
        if self.is_empty:
            raise ValueError(f"no tax rates available for server '{self.server}'")
        return min(self.rates.values())

    @property
    def lowest_locations(self) -> List[str]:
        """Every location tied at the lowest rate, in report order."""
        lowest = self.lowest_rate
        return [location for location, rate in self if rate == lowest]
