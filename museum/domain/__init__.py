from museum.domain.models import Exhibit, Museum, Patron
from museum.domain.value_objects import ExhibitId, MuseumId, PatronId

__all__ = [
    "Museum",
    "Exhibit",
    "Patron",
    "MuseumId",
    "ExhibitId",
    "PatronId",
]
