"""
Domain errors for the cars app.

Each error renders to the ``{"error": {"name", "message", "details"}}``
envelope returned by the API.
"""
from rest_framework import status

from .serializers import CarSerializer


class ApplicationError(Exception):
    """Base class for expected failures that map to an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message='', details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def name(self):
        return type(self).__name__

    def to_dict(self):
        return {
            'error': {
                'name': self.name,
                'message': self.message,
                'details': self.details,
            }
        }

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = Exception.__hash__


class CarAlreadyRentedError(ApplicationError):
    """The requested rental window overlaps an existing rental of the car."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, car):
        self.car = car
        super().__init__(
            f'{car.name} is already rented!!',
            details={'car': CarSerializer(car).data},
        )


class RecordNotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, model_name, pk):
        super().__init__(
            f'{model_name} with id {pk} was not found.',
            details={'model': model_name, 'id': pk},
        )
