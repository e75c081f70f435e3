"""Play catalog - read-only lookup from play id to Play."""
from types import MappingProxyType
from typing import Iterator, Mapping

from .errors import UnknownPlayError
from .models import Play


class PlayCatalog:
    """Plays keyed by id. Never modified after construction."""

    def __init__(self, plays: Mapping[str, Play]):
        self._plays = MappingProxyType(dict(plays))

    def lookup(self, play_id: str) -> Play:
        """Return the play for an id, raising UnknownPlayError if absent."""
        try:
            return self._plays[play_id]
        except KeyError:
            raise UnknownPlayError(play_id) from None

    def __contains__(self, play_id: object) -> bool:
        return play_id in self._plays

    def __iter__(self) -> Iterator[str]:
        return iter(self._plays)

    def __len__(self) -> int:
        return len(self._plays)
