from django.urls import path

from museum.handlers import (
    AttendanceView,
    ExhibitListView,
    InterestView,
    MuseumDetailView,
    MuseumListView,
    PatronListView,
    RecommendationListView,
)

urlpatterns = [
    path("museums", MuseumListView.as_view(), name="museum-list"),
    path("museums/<str:museum_id>", MuseumDetailView.as_view(), name="museum-detail"),
    path(
        "museums/<str:museum_id>/exhibits",
        ExhibitListView.as_view(),
        name="exhibit-list",
    ),
    path(
        "museums/<str:museum_id>/patrons",
        PatronListView.as_view(),
        name="patron-list",
    ),
    path(
        "museums/<str:museum_id>/patrons/<str:patron_id>/recommendations",
        RecommendationListView.as_view(),
        name="recommendation-list",
    ),
    path(
        "museums/<str:museum_id>/attendance",
        AttendanceView.as_view(),
        name="attendance",
    ),
    path(
        "museums/<str:museum_id>/interest",
        InterestView.as_view(),
        name="interest",
    ),
]
