"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from museum.domain import Museum, MuseumId


class MuseumStore(ABC):
    """Interface for museum storage operations."""

    @abstractmethod
    def list_museums(self) -> list[Museum]:
        """Return all museums in the order they were added."""
        ...

    @abstractmethod
    def get_museum(self, museum_id: MuseumId) -> Museum | None:
        """Return a museum by ID, or None if not found."""
        ...

    @abstractmethod
    def add_museum(self, museum: Museum) -> None:
        """Store a museum under its own ID."""
        ...
