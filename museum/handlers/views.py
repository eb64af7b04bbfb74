"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from museum.domain.errors import DomainError, ErrorCode
from museum.handlers.serializers import (
    ExhibitPatronsSerializer,
    ExhibitSerializer,
    MuseumSerializer,
    PatronSerializer,
    exhibit_patrons,
)
from museum.services import MuseumService
from museum.stores import default_store

ERROR_STATUS = {
    ErrorCode.INVALID_MUSEUM_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PATRON_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MUSEUM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PATRON_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def get_service() -> MuseumService:
    return MuseumService(default_store)


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


class MuseumListView(APIView):
    """Handler for GET/POST /api/museums"""

    def get(self, request: Request) -> Response:
        museums = get_service().list_museums()
        return Response(MuseumSerializer(museums, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = MuseumSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        museum = get_service().create_museum(serializer.validated_data["name"])
        return Response(MuseumSerializer(museum).data, status=status.HTTP_201_CREATED)


class MuseumDetailView(APIView):
    """Handler for GET /api/museums/{museum_id}"""

    def get(self, request: Request, museum_id: str) -> Response:
        try:
            museum = get_service().get_museum(museum_id)
        except DomainError as error:
            return error_response(error)
        return Response(MuseumSerializer(museum).data)


class ExhibitListView(APIView):
    """Handler for GET/POST /api/museums/{museum_id}/exhibits"""

    def get(self, request: Request, museum_id: str) -> Response:
        try:
            museum = get_service().get_museum(museum_id)
        except DomainError as error:
            return error_response(error)
        return Response(ExhibitSerializer(museum.exhibits, many=True).data)

    def post(self, request: Request, museum_id: str) -> Response:
        serializer = ExhibitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            exhibit = get_service().add_exhibit(museum_id, **serializer.validated_data)
        except DomainError as error:
            return error_response(error)
        return Response(ExhibitSerializer(exhibit).data, status=status.HTTP_201_CREATED)


class PatronListView(APIView):
    """Handler for GET/POST /api/museums/{museum_id}/patrons

    Posting a patron admits them; the response carries the balance left
    after touring.
    """

    def get(self, request: Request, museum_id: str) -> Response:
        try:
            museum = get_service().get_museum(museum_id)
        except DomainError as error:
            return error_response(error)
        return Response(PatronSerializer(museum.patrons, many=True).data)

    def post(self, request: Request, museum_id: str) -> Response:
        serializer = PatronSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            patron = get_service().admit_patron(museum_id, **serializer.validated_data)
        except DomainError as error:
            return error_response(error)
        return Response(PatronSerializer(patron).data, status=status.HTTP_201_CREATED)


class RecommendationListView(APIView):
    """Handler for GET /api/museums/{museum_id}/patrons/{patron_id}/recommendations"""

    def get(self, request: Request, museum_id: str, patron_id: str) -> Response:
        try:
            exhibits = get_service().recommend_exhibits(museum_id, patron_id)
        except DomainError as error:
            return error_response(error)
        return Response(ExhibitSerializer(exhibits, many=True).data)


class AttendanceView(APIView):
    """Handler for GET /api/museums/{museum_id}/attendance"""

    def get(self, request: Request, museum_id: str) -> Response:
        try:
            attendance = get_service().get_attendance(museum_id)
        except DomainError as error:
            return error_response(error)
        return Response(
            ExhibitPatronsSerializer(exhibit_patrons(attendance), many=True).data
        )


class InterestView(APIView):
    """Handler for GET /api/museums/{museum_id}/interest"""

    def get(self, request: Request, museum_id: str) -> Response:
        try:
            interest = get_service().get_interest(museum_id)
        except DomainError as error:
            return error_response(error)
        return Response(
            ExhibitPatronsSerializer(exhibit_patrons(interest), many=True).data
        )
