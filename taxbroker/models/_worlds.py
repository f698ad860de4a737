from typing import FrozenSet, Iterable


class WorldRegistry:
    """
    Holds the set of server names we know to be valid.

    The set is never mutated in place. Each refresh builds a new frozenset and swaps it
    in, so a command handler reading the registry while the scheduler refreshes it sees
    either the old set or the new one in full.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: FrozenSet[str] = frozenset(n.lower() for n in names)

    @property
    def names(self) -> FrozenSet[str]:
        return self._names

    def replace(self, names: Iterable[str]) -> None:
        """Swap in a new set of valid server names."""
        self._names = frozenset(n.lower() for n in names)

    def is_valid(self, server: str) -> bool:
        return server.lower() in self._names

    def __len__(self) -> int:
        return len(self._names)
