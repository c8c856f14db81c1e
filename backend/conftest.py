"""
Pytest configuration and fixtures for the car rental project.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.accounts.models import User
from apps.cars.models import Car, UserCar


@pytest.fixture
def fleet_admin(db):
    """Create an admin user for testing."""
    return User.objects.create_user(
        email='admin@test.com',
        password='testpass123',
        first_name='John',
        last_name='Doe',
        role=User.Role.ADMIN
    )


@pytest.fixture
def customer_user(db):
    """Create a customer user for testing."""
    return User.objects.create_user(
        email='customer@test.com',
        password='testpass123',
        first_name='Jane',
        last_name='Smith',
        role=User.Role.CUSTOMER
    )


@pytest.fixture
def another_customer(db):
    """Create another customer user for testing."""
    return User.objects.create_user(
        email='customer2@test.com',
        password='testpass123',
        first_name='Bob',
        last_name='Johnson',
        role=User.Role.CUSTOMER
    )


@pytest.fixture
def car(db):
    """Create a car for testing."""
    return Car.objects.create(
        name='Test Car',
        price=1000,
        size=Car.Size.MEDIUM,
        image='test.jpg'
    )


@pytest.fixture
def large_car(db):
    """Create a second car of another size."""
    return Car.objects.create(
        name='Big Van',
        price=2500,
        size=Car.Size.LARGE,
        image='van.jpg'
    )


@pytest.fixture
def rental(db, car, customer_user):
    """Create a rental covering the current time."""
    now = timezone.now()
    return UserCar.objects.create(
        user=customer_user,
        car=car,
        rent_started_at=now - timedelta(hours=1),
        rent_ended_at=now + timedelta(days=1)
    )


@pytest.fixture
def past_rental(db, car, another_customer):
    """Create a rental that ended yesterday."""
    now = timezone.now()
    return UserCar.objects.create(
        user=another_customer,
        car=car,
        rent_started_at=now - timedelta(days=3),
        rent_ended_at=now - timedelta(days=1)
    )


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, customer_user):
    """Create an API client authenticated as a customer."""
    api_client.force_authenticate(user=customer_user)
    return api_client


@pytest.fixture
def admin_api_client(api_client, fleet_admin):
    """Create an API client authenticated as an admin."""
    api_client.force_authenticate(user=fleet_admin)
    return api_client
