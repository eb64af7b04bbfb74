"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass, field
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True)
class MuseumId:
    """Unique identifier for a Museum."""

    value: UUID = field(default_factory=uuid4)

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ExhibitId:
    """Unique identifier for an Exhibit."""

    value: UUID = field(default_factory=uuid4)

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PatronId:
    """Unique identifier for a Patron."""

    value: UUID = field(default_factory=uuid4)

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)
