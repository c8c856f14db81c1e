"""
Celery tasks for the cars app.
"""
import logging

from celery import shared_task
from django.db import transaction
from django.utils import timezone

from apps.cars.models import Car, UserCar

logger = logging.getLogger(__name__)


def refresh_rented_flags(at=None, dry_run=False):
    """
    Recompute ``Car.is_currently_rented`` from the rentals covering ``at``.

    Returns a ``(marked, released)`` tuple with the number of cars that
    became rented and the number that became free.
    """
    at = at or timezone.now()
    rented_ids = UserCar.objects.active(at=at).values('car_id')

    to_mark = Car.objects.filter(pk__in=rented_ids, is_currently_rented=False)
    to_release = Car.objects.filter(is_currently_rented=True).exclude(pk__in=rented_ids)

    if dry_run:
        return to_mark.count(), to_release.count()

    with transaction.atomic():
        marked = to_mark.update(is_currently_rented=True)
        released = to_release.update(is_currently_rented=False)

    logger.info(f"Rented flags refreshed at {at.isoformat()}: {marked} marked, {released} released")
    return marked, released


@shared_task
def refresh_rented_cars():
    """
    Keep the denormalized rented flag in line with the rental windows.
    Runs every 5 minutes through Celery beat.
    """
    marked, released = refresh_rented_flags()
    return f"Marked {marked} cars as rented, released {released} cars"
