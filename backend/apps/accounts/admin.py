"""
Admin configuration for accounts app.
"""
from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin configuration for User model."""

    list_display = ['email', 'full_name', 'role', 'is_active', 'created_at']
    list_filter = ['role', 'is_active']
    search_fields = ['email', 'first_name', 'last_name']
    readonly_fields = ['created_at', 'updated_at', 'last_login']
    exclude = ['password', 'user_permissions', 'groups']
    ordering = ['-created_at']
