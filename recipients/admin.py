from django.contrib import admin
from .models import ExternalOrganization, Recipient, RecipientProcessingLocation


@admin.register(ExternalOrganization)
class ExternalOrganizationAdmin(admin.ModelAdmin):
    list_display = ['legal_name', 'trading_name', 'headquarters_country', 'organization']
    search_fields = ['legal_name', 'trading_name']


@admin.register(Recipient)
class RecipientAdmin(admin.ModelAdmin):
    list_display = ['name', 'recipient_type', 'external_organization', 'parent_recipient', 'is_active']
    list_filter = ['recipient_type', 'is_active']
    search_fields = ['name', 'purpose']


@admin.register(RecipientProcessingLocation)
class RecipientProcessingLocationAdmin(admin.ModelAdmin):
    list_display = ['recipient', 'service', 'location_role', 'country', 'transfer_mechanism', 'is_active']
    list_filter = ['location_role', 'is_active', 'country']
    search_fields = ['service', 'recipient__name']
