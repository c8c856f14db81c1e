"""
Car and rental models for the car rental application.
"""
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Car(models.Model):
    """
    Car model representing a vehicle in the rental fleet.
    ``is_currently_rented`` is a denormalized flag refreshed from the rentals.
    """

    class Size(models.TextChoices):
        SMALL = 'small', _('Small')
        MEDIUM = 'medium', _('Medium')
        LARGE = 'large', _('Large')

    name = models.CharField(
        max_length=255,
        help_text=_('Display name of the car')
    )
    price = models.PositiveIntegerField(
        validators=[MinValueValidator(0)],
        help_text=_('Rental price per day')
    )
    size = models.CharField(
        max_length=10,
        choices=Size.choices,
        default=Size.SMALL,
        help_text=_('Size category of the car')
    )
    image = models.CharField(
        max_length=255,
        blank=True,
        default='',
        help_text=_('Path or URL of the car picture')
    )
    is_currently_rented = models.BooleanField(
        default=False,
        help_text=_('Whether a rental window currently covers this car')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cars'
        verbose_name = _('car')
        verbose_name_plural = _('cars')
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['name'], name='cars_name_idx'),
            models.Index(fields=['size'], name='cars_size_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_size_display()})"

    def save(self, *args, **kwargs):
        """Override save to run model validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def update(self, **fields):
        """Assign the given fields, save and return the car."""
        for name, value in fields.items():
            setattr(self, name, value)
        self.save()
        return self


class UserCarQuerySet(models.QuerySet):

    def overlapping(self, car, started_at, ended_at):
        """
        Rentals of ``car`` whose window touches ``[started_at, ended_at]``.

        Bounds are inclusive. A rental without an end reaches every instant
        after its start.
        """
        return self.filter(
            models.Q(rent_ended_at__isnull=True) | models.Q(rent_ended_at__gte=started_at),
            car_id=car.pk,
            rent_started_at__lte=ended_at,
        )

    def active(self, at=None):
        """Rentals whose window contains ``at`` (defaults to now)."""
        at = at or timezone.now()
        return self.filter(
            models.Q(rent_ended_at__isnull=True) | models.Q(rent_ended_at__gte=at),
            rent_started_at__lte=at,
        )


class UserCar(models.Model):
    """
    UserCar model representing a car rented by a user for a time window.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='rentals',
        help_text=_('User who rented the car')
    )
    car = models.ForeignKey(
        Car,
        on_delete=models.CASCADE,
        related_name='rentals',
        help_text=_('Car being rented')
    )
    rent_started_at = models.DateTimeField(
        help_text=_('When the rental starts')
    )
    rent_ended_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text=_('When the rental ends (empty means open-ended)')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserCarQuerySet.as_manager()

    class Meta:
        db_table = 'user_cars'
        verbose_name = _('rental')
        verbose_name_plural = _('rentals')
        ordering = ['-rent_started_at']
        indexes = [
            models.Index(fields=['car', 'rent_started_at'], name='user_cars_car_start_idx'),
        ]

    def __str__(self):
        return f"Rental #{self.id}: {self.car.name} by {self.user.email}"

    @property
    def is_active(self):
        """Check if the rental window contains the current time."""
        now = timezone.now()
        if now < self.rent_started_at:
            return False
        return self.rent_ended_at is None or now <= self.rent_ended_at
