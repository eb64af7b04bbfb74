from museum.stores.interfaces import MuseumStore
from museum.stores.memory_store import InMemoryMuseumStore, default_store

__all__ = ["MuseumStore", "InMemoryMuseumStore", "default_store"]
