from django.contrib import admin
from .models import Organization


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    """Tenant management. Users are attached to an organization from the Users section."""
    list_display = ['name', 'slug', 'plan', 'is_active', 'member_count', 'created_at']
    list_filter = ['plan', 'is_active', 'created_at']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}

    @admin.display(description='Members')
    def member_count(self, obj):
        return obj.users.count()
