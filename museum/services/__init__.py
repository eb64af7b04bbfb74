from museum.services.museum_service import MuseumService

__all__ = ["MuseumService"]
