from museum.handlers.views import (
    AttendanceView,
    ExhibitListView,
    InterestView,
    MuseumDetailView,
    MuseumListView,
    PatronListView,
    RecommendationListView,
)

__all__ = [
    "MuseumListView",
    "MuseumDetailView",
    "ExhibitListView",
    "PatronListView",
    "RecommendationListView",
    "AttendanceView",
    "InterestView",
]
