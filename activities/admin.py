from django.contrib import admin
from .models import DataProcessingActivity


@admin.register(DataProcessingActivity)
class DataProcessingActivityAdmin(admin.ModelAdmin):
    list_display = ['name', 'organization', 'status', 'risk_level', 'requires_dpia', 'dpia_status']
    list_filter = ['status', 'risk_level', 'dpia_status']
    search_fields = ['name', 'description']
