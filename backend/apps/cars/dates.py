"""
Date provider used to compute rental windows.
"""
from datetime import datetime, timedelta

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

UNITS = {
    'second': 'seconds',
    'minute': 'minutes',
    'hour': 'hours',
    'day': 'days',
    'week': 'weeks',
}


class RentalDate:
    """A timezone-aware point in time supporting unit arithmetic."""

    def __init__(self, value):
        self.value = value

    def add(self, amount, unit):
        """Return the wrapped datetime shifted by ``amount`` ``unit``s."""
        key = UNITS.get(unit.rstrip('s'))
        if key is None:
            raise ValueError(f'Unsupported time unit: {unit!r}')
        return self.value + timedelta(**{key: amount})

    def __repr__(self):
        return f'RentalDate({self.value.isoformat()})'


def _to_datetime(value):
    if value is None:
        return timezone.now()
    if isinstance(value, datetime):
        return value
    parsed = parse_datetime(value)
    if parsed is None:
        day = parse_date(value)
        if day is None:
            raise ValueError(f'Invalid date: {value!r}')
        parsed = datetime(day.year, day.month, day.day)
    return parsed


def rental_date(value=None):
    """Wrap ``value`` (datetime, ISO string or ``None`` for now) in a RentalDate."""
    moment = _to_datetime(value)
    if timezone.is_naive(moment):
        moment = timezone.make_aware(moment)
    return RentalDate(moment)
