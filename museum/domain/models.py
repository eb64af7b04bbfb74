"""Domain models for a museum, its exhibits and its patrons.

Patron and Exhibit are plain records. Museum is the aggregate root and owns
all querying and the attendance simulation run on admission.
"""

import logging
from dataclasses import FrozenInstanceError, dataclass, field

from museum.domain.value_objects import ExhibitId, MuseumId, PatronId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Exhibit:
    """An attraction with a fixed admission cost."""

    name: str
    cost: int
    id: ExhibitId = field(default_factory=ExhibitId)

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError("Exhibit cost cannot be negative")


@dataclass
class Patron:
    """A visitor with spending money and declared exhibit interests."""

    name: str
    spending_money: int
    interests: list[str] = field(default_factory=list, init=False)
    id: PatronId = field(default_factory=PatronId)

    def __post_init__(self) -> None:
        if self.spending_money < 0:
            raise ValueError("Spending money cannot be negative")

    def __setattr__(self, name: str, value) -> None:
        if name == "name" and name in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'name'")
        super().__setattr__(name, value)

    def add_interest(self, name: str) -> None:
        self.interests.append(name)


@dataclass(eq=False)
class Museum:
    """Aggregate of exhibits and admitted patrons.

    Attendance is recorded in ``patrons_of_exhibits``; an exhibit appears
    there only once a patron has paid to see it.
    """

    name: str
    exhibits: list[Exhibit] = field(default_factory=list, init=False)
    patrons: list[Patron] = field(default_factory=list, init=False)
    revenue: int = field(default=0, init=False)
    patrons_of_exhibits: dict[Exhibit, list[Patron]] = field(
        default_factory=dict, init=False
    )
    id: MuseumId = field(default_factory=MuseumId)

    def __setattr__(self, name: str, value) -> None:
        if name == "name" and name in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'name'")
        super().__setattr__(name, value)

    def add_exhibit(self, exhibit: Exhibit) -> None:
        self.exhibits.append(exhibit)

    def admit(self, patron: Patron) -> None:
        """Admit a patron and let them tour the exhibits they can afford."""
        self.patrons.append(patron)
        logger.info(
            "Admitted %s to %s with %s to spend",
            patron.name,
            self.name,
            patron.spending_money,
        )
        self._attend_exhibits(patron)

    def interested(self, patron: Patron, exhibit: Exhibit) -> bool:
        return exhibit.name in patron.interests

    def recommend_exhibits(self, patron: Patron) -> list[Exhibit]:
        return [exhibit for exhibit in self.exhibits if self.interested(patron, exhibit)]

    def patrons_who_like_exhibit(self, exhibit: Exhibit) -> list[Patron]:
        return [patron for patron in self.patrons if self.interested(patron, exhibit)]

    def patrons_by_exhibit_interest(self) -> dict[Exhibit, list[Patron]]:
        """Map each exhibit to its interested patrons, omitting unpopular ones."""
        by_interest = {}
        for exhibit in self.exhibits:
            patrons = self.patrons_who_like_exhibit(exhibit)
            if patrons:
                by_interest[exhibit] = patrons
        return by_interest

    def interested_exhibits_by_cost(self, patron: Patron) -> list[Exhibit]:
        """Return recommended exhibits from costliest to cheapest.

        Exhibits of equal cost keep their insertion order.
        """
        return sorted(
            self.recommend_exhibits(patron),
            key=lambda exhibit: exhibit.cost,
            reverse=True,
        )

    def _attend_exhibits(self, patron: Patron) -> None:
        for exhibit in self.interested_exhibits_by_cost(patron):
            if patron.spending_money < exhibit.cost:
                logger.debug(
                    "%s cannot afford %s (%s > %s)",
                    patron.name,
                    exhibit.name,
                    exhibit.cost,
                    patron.spending_money,
                )
                continue
            self.revenue += exhibit.cost
            patron.spending_money -= exhibit.cost
            self.patrons_of_exhibits.setdefault(exhibit, []).append(patron)
            logger.debug("%s attended %s for %s", patron.name, exhibit.name, exhibit.cost)
