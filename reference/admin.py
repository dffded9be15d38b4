from django.contrib import admin
from .models import Country, TransferMechanism


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ['name', 'iso_code', 'iso_code3', 'gdpr_status', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name', 'iso_code', 'iso_code3']


@admin.register(TransferMechanism)
class TransferMechanismAdmin(admin.ModelAdmin):
    """Edits made here are not tracked; use the tracked repositories from application code."""
    list_display = ['name', 'code', 'gdpr_article', 'category', 'requires_supplementary_measures', 'is_active']
    list_filter = ['category', 'requires_supplementary_measures', 'is_active']
    search_fields = ['name', 'code']
