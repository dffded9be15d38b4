from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    User management.

    Create the Organization first, then attach users to it here with a role.
    Changes a user makes through the API are attributed to their organization.
    """
    list_display = ['username', 'email', 'organization', 'role', 'is_active', 'is_staff', 'date_joined']
    list_filter = ['role', 'is_active', 'is_staff', 'organization']
    search_fields = ['username', 'email', 'organization__name']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Organization', {
            'fields': ('organization', 'role'),
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Organization', {
            'fields': ('organization', 'role'),
        }),
    )
