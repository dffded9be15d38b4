from django.contrib import admin
from .models import DigitalAsset, AssetProcessingLocation


class AssetProcessingLocationInline(admin.TabularInline):
    model = AssetProcessingLocation
    extra = 0
    fields = ['service', 'location_role', 'country', 'transfer_mechanism', 'is_active']


@admin.register(DigitalAsset)
class DigitalAssetAdmin(admin.ModelAdmin):
    list_display = ['name', 'organization', 'asset_type', 'primary_hosting_country', 'contains_personal_data', 'integration_status']
    list_filter = ['asset_type', 'integration_status', 'contains_personal_data']
    search_fields = ['name', 'description', 'organization__name']
    inlines = [AssetProcessingLocationInline]


@admin.register(AssetProcessingLocation)
class AssetProcessingLocationAdmin(admin.ModelAdmin):
    list_display = ['digital_asset', 'service', 'location_role', 'country', 'transfer_mechanism', 'is_active']
    list_filter = ['location_role', 'is_active', 'country']
    search_fields = ['service', 'digital_asset__name']
