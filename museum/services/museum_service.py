"""Museum service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate identifiers and map misses to domain errors
- Return domain models or raise domain errors
"""

import logging

from museum.domain import Exhibit, Museum, MuseumId, Patron, PatronId
from museum.domain.errors import (
    InvalidMuseumIdError,
    InvalidPatronIdError,
    MuseumNotFoundError,
    PatronNotFoundError,
)
from museum.stores.interfaces import MuseumStore

logger = logging.getLogger(__name__)


class MuseumService:
    """Service for museum, exhibit and admission operations."""

    def __init__(self, store: MuseumStore) -> None:
        self._store = store

    def list_museums(self) -> list[Museum]:
        """Return all museums."""
        return self._store.list_museums()

    def create_museum(self, name: str) -> Museum:
        museum = Museum(name)
        self._store.add_museum(museum)
        logger.info("Opened museum %s (%s)", museum.name, museum.id)
        return museum

    def get_museum(self, museum_id: str) -> Museum:
        """Return a museum by ID.

        Raises:
            InvalidMuseumIdError: If the museum_id is not a valid UUID.
            MuseumNotFoundError: If the museum does not exist.
        """
        try:
            parsed = MuseumId.from_string(museum_id)
        except ValueError as exc:
            raise InvalidMuseumIdError() from exc

        museum = self._store.get_museum(parsed)
        if museum is None:
            logger.warning("Museum %s not found", museum_id)
            raise MuseumNotFoundError(museum_id)
        return museum

    def add_exhibit(self, museum_id: str, name: str, cost: int) -> Exhibit:
        museum = self.get_museum(museum_id)
        exhibit = Exhibit(name, cost)
        museum.add_exhibit(exhibit)
        return exhibit

    def admit_patron(
        self,
        museum_id: str,
        name: str,
        spending_money: int,
        interests: list[str] | None = None,
    ) -> Patron:
        """Create a patron with the given interests and admit them.

        The returned patron reflects any spending done during admission.
        """
        museum = self.get_museum(museum_id)
        patron = Patron(name, spending_money)
        for interest in interests or []:
            patron.add_interest(interest)
        museum.admit(patron)
        return patron

    def get_patron(self, museum_id: str, patron_id: str) -> Patron:
        """Return an admitted patron by ID.

        Raises:
            InvalidMuseumIdError, MuseumNotFoundError: See get_museum.
            InvalidPatronIdError: If the patron_id is not a valid UUID.
            PatronNotFoundError: If no such patron was admitted.
        """
        museum = self.get_museum(museum_id)
        return self._find_patron(museum, patron_id)

    def recommend_exhibits(self, museum_id: str, patron_id: str) -> list[Exhibit]:
        """Return the patron's interesting exhibits, costliest first."""
        museum = self.get_museum(museum_id)
        patron = self._find_patron(museum, patron_id)
        return museum.interested_exhibits_by_cost(patron)

    def get_attendance(self, museum_id: str) -> dict[Exhibit, list[Patron]]:
        return self.get_museum(museum_id).patrons_of_exhibits

    def get_interest(self, museum_id: str) -> dict[Exhibit, list[Patron]]:
        return self.get_museum(museum_id).patrons_by_exhibit_interest()

    def _find_patron(self, museum: Museum, patron_id: str) -> Patron:
        try:
            parsed = PatronId.from_string(patron_id)
        except ValueError as exc:
            raise InvalidPatronIdError() from exc

        for patron in museum.patrons:
            if patron.id == parsed:
                return patron
        logger.warning("Patron %s not admitted to %s", patron_id, museum.id)
        raise PatronNotFoundError(patron_id)
