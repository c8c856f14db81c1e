"""
Filters for the cars app.
"""
import django_filters

from .models import Car, UserCar


class CarFilter(django_filters.FilterSet):
    """Filter for Car listings."""

    size = django_filters.ChoiceFilter(choices=Car.Size.choices)
    available_at = django_filters.IsoDateTimeFilter(method='filter_available_at')

    class Meta:
        model = Car
        fields = ['size', 'available_at']

    def filter_available_at(self, queryset, name, value):
        """Exclude cars with a rental covering the given instant."""
        rented = UserCar.objects.active(at=value).values('car_id')
        return queryset.exclude(pk__in=rented)
