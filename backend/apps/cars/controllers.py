"""
Request handlers for the car resource.

``CarController`` turns DRF requests into ORM calls on the models it is
constructed with and turns the results into DRF responses. Expected failures
are answered here; anything else is raised for the API exception handler.
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.settings import api_settings

from .errors import CarAlreadyRentedError, RecordNotFoundError
from .filters import CarFilter
from .serializers import CarSerializer, RentCarSerializer, UserCarSerializer

logger = logging.getLogger(__name__)

CAR_FIELDS = ('name', 'price', 'size', 'image')


def error_payload(err):
    """Envelope for a rejected create or update."""
    return {
        'error': {
            'name': type(err).__name__,
            'message': str(err),
        }
    }


class CarController:
    """Handlers for listing, reading, creating, renting, updating and deleting cars."""

    filterset_class = CarFilter
    pagination_class = api_settings.DEFAULT_PAGINATION_CLASS

    def __init__(self, car_model, user_car_model, date_provider):
        self.car_model = car_model
        self.user_car_model = user_car_model
        self.date_provider = date_provider

    @property
    def rent_duration_days(self):
        return getattr(settings, 'RENT_DEFAULT_DURATION_DAYS', 1)

    def handle_list_cars(self, request):
        paginator = self.pagination_class()
        cars = paginator.paginate_queryset(self.get_list_queryset(request), request)
        return paginator.get_paginated_response(CarSerializer(cars, many=True).data)

    def handle_get_car(self, request, pk):
        # A missing car answers 404 like update and rent do.
        car = self.find_car(pk)
        if car is None:
            err = RecordNotFoundError(self.car_model.__name__, pk)
            return Response(err.to_dict(), status=err.status_code)
        return Response(CarSerializer(car).data, status=status.HTTP_200_OK)

    def handle_create_car(self, request):
        fields = self.get_fields_from_request(request)
        try:
            car = self.car_model.objects.create(**fields)
        except Exception as err:
            logger.warning(f"Car creation rejected: {type(err).__name__}: {err}")
            return Response(error_payload(err), status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        logger.info(f"Created car {car.pk} ({car.name})")
        return Response(CarSerializer(car).data, status=status.HTTP_201_CREATED)

    def handle_rent_car(self, request, pk):
        """
        Rent a car for the requesting user.

        The overlap check and the insert are separate queries, so two
        concurrent requests for the same window can both succeed.
        """
        serializer = RentCarSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        started_at = serializer.validated_data['rent_started_at']
        ended_at = serializer.validated_data.get('rent_ended_at')

        car = self.find_car(pk)
        if car is None:
            err = RecordNotFoundError(self.car_model.__name__, pk)
            return Response(err.to_dict(), status=err.status_code)

        if not ended_at:
            ended_at = self.date_provider(started_at).add(self.rent_duration_days, 'day')

        active_rent = self.user_car_model.objects.overlapping(car, started_at, ended_at).first()
        if active_rent is not None:
            err = CarAlreadyRentedError(car)
            logger.warning(f"Car {car.pk} already rented between {started_at} and {ended_at}")
            return Response(err.to_dict(), status=err.status_code)

        user_car = self.user_car_model.objects.create(
            user_id=request.user.id,
            car_id=car.pk,
            rent_started_at=started_at,
            rent_ended_at=ended_at,
        )
        logger.info(f"User {request.user.id} rented car {car.pk} from {started_at} to {ended_at}")
        return Response(UserCarSerializer(user_car).data, status=status.HTTP_201_CREATED)

    def handle_update_car(self, request, pk):
        fields = self.get_fields_from_request(request)
        try:
            car = self.get_car_from_request(request, pk)
            car = car.update(**fields)
        except RecordNotFoundError as err:
            return Response(err.to_dict(), status=err.status_code)
        except Exception as err:
            logger.warning(f"Car {pk} update rejected: {type(err).__name__}: {err}")
            return Response(error_payload(err), status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        return Response(CarSerializer(car).data, status=status.HTTP_200_OK)

    def handle_delete_car(self, request, pk):
        self.car_model.objects.filter(pk=pk).delete()
        logger.info(f"Deleted car {pk}")
        return Response(status=status.HTTP_204_NO_CONTENT)

    def get_car_from_request(self, request, pk):
        car = self.find_car(pk)
        if car is None:
            raise RecordNotFoundError(self.car_model.__name__, pk)
        return car

    def get_fields_from_request(self, request):
        return {name: request.data[name] for name in CAR_FIELDS if name in request.data}

    def find_car(self, pk):
        return self.car_model.objects.filter(pk=pk).first()

    def get_list_queryset(self, request):
        queryset = self.car_model.objects.all()
        if self.filterset_class is not None:
            queryset = self.filterset_class(request.query_params, queryset=queryset).qs
        return queryset

