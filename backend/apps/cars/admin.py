"""
Admin configuration for cars app.
"""
from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Car, UserCar


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    """Admin configuration for Car model."""

    list_display = ['name', 'size', 'price', 'is_currently_rented', 'created_at']
    list_filter = ['size', 'is_currently_rented', 'created_at']
    search_fields = ['name']
    readonly_fields = ['is_currently_rented', 'created_at', 'updated_at']
    ordering = ['-created_at']

    fieldsets = (
        (_('Car Information'), {
            'fields': ('name', 'size', 'price', 'image')
        }),
        (_('Availability'), {
            'fields': ('is_currently_rented',)
        }),
        (_('Metadata'), {
            'fields': ('created_at', 'updated_at')
        }),
    )


@admin.register(UserCar)
class UserCarAdmin(admin.ModelAdmin):
    """Admin configuration for UserCar model."""

    list_display = ['id', 'car', 'user', 'rent_started_at', 'rent_ended_at', 'is_active']
    list_filter = ['rent_started_at']
    search_fields = ['car__name', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-rent_started_at']

    fieldsets = (
        (_('Rental Details'), {
            'fields': ('car', 'user')
        }),
        (_('Timing'), {
            'fields': ('rent_started_at', 'rent_ended_at')
        }),
        (_('Metadata'), {
            'fields': ('created_at', 'updated_at')
        }),
    )

    @admin.display(boolean=True, description=_('Active'))
    def is_active(self, obj):
        """Display whether the rental covers the current time."""
        return obj.is_active
