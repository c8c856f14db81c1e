"""
Views for the cars app.
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated

from apps.accounts.permissions import IsAdminOrReadOnly

from .controllers import CarController
from .dates import rental_date
from .models import Car, UserCar
from .serializers import CarSerializer, RentCarSerializer, UserCarSerializer


@extend_schema_view(
    list=extend_schema(
        summary='List all cars',
        description='Get a paginated list of cars, optionally filtered by size or availability.',
        parameters=[
            OpenApiParameter('page', OpenApiTypes.INT, description='Page number (default 1)'),
            OpenApiParameter('page_size', OpenApiTypes.INT, description='Cars per page'),
            OpenApiParameter('size', OpenApiTypes.STR, enum=Car.Size.values),
            OpenApiParameter('available_at', OpenApiTypes.DATETIME,
                             description='Only cars without a rental covering this instant'),
        ],
        responses={200: OpenApiTypes.OBJECT},
        tags=['Cars']
    ),
    retrieve=extend_schema(
        summary='Get car details',
        description='Retrieve detailed information about a specific car.',
        responses={200: CarSerializer},
        tags=['Cars']
    ),
    create=extend_schema(
        summary='Create a new car',
        description='Add a new car to the fleet (admin only).',
        request=CarSerializer,
        responses={201: CarSerializer},
        tags=['Cars']
    ),
    update=extend_schema(
        summary='Update car',
        description='Update a car (admin only).',
        request=CarSerializer,
        responses={200: CarSerializer},
        tags=['Cars']
    ),
    partial_update=extend_schema(
        summary='Partial update car',
        description='Update specific fields of a car (admin only).',
        request=CarSerializer,
        responses={200: CarSerializer},
        tags=['Cars']
    ),
    destroy=extend_schema(
        summary='Delete car',
        description='Remove a car from the fleet (admin only).',
        responses={204: None},
        tags=['Cars']
    )
)
class CarViewSet(viewsets.ViewSet):
    """
    ViewSet routing car requests to CarController.
    - List/Retrieve/Rent: Available to all authenticated users
    - Create/Update/Delete: Only available to admins
    """

    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]
    lookup_value_regex = r'\d+'
    controller_class = CarController

    def get_controller(self):
        """Build a controller wired to the ORM models."""
        return self.controller_class(
            car_model=Car,
            user_car_model=UserCar,
            date_provider=rental_date,
        )

    def list(self, request):
        return self.get_controller().handle_list_cars(request)

    def retrieve(self, request, pk=None):
        return self.get_controller().handle_get_car(request, pk)

    def create(self, request):
        return self.get_controller().handle_create_car(request)

    def update(self, request, pk=None):
        return self.get_controller().handle_update_car(request, pk)

    def partial_update(self, request, pk=None):
        return self.get_controller().handle_update_car(request, pk)

    def destroy(self, request, pk=None):
        return self.get_controller().handle_delete_car(request, pk)

    @extend_schema(
        summary='Rent a car',
        description='Rent a car for a time window. The end defaults to one day after the start.',
        request=RentCarSerializer,
        responses={201: UserCarSerializer},
        tags=['Cars']
    )
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def rent(self, request, pk=None):
        """Endpoint to rent a car."""
        return self.get_controller().handle_rent_car(request, pk)
