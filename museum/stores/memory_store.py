"""In-process implementation of the MuseumStore.

Museums live only as long as the process does.
"""

from museum.domain import Museum, MuseumId
from museum.stores.interfaces import MuseumStore


class InMemoryMuseumStore(MuseumStore):
    """Dict-backed museum store."""

    def __init__(self) -> None:
        self._museums: dict[MuseumId, Museum] = {}

    def list_museums(self) -> list[Museum]:
        return list(self._museums.values())

    def get_museum(self, museum_id: MuseumId) -> Museum | None:
        return self._museums.get(museum_id)

    def add_museum(self, museum: Museum) -> None:
        self._museums[museum.id] = museum

    def clear(self) -> None:
        self._museums.clear()


default_store = InMemoryMuseumStore()
