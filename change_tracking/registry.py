"""
Tracked-field registry.

Declares, per component kind, which attributes are compliance-relevant.
Only these attributes ever show up in a diff or a snapshot for the kind.
Editing a tuple here affects entries written from then on; existing
entries are never rewritten.
"""
from types import MappingProxyType

from core.constants import ComponentType


TRACKED_FIELDS_BY_COMPONENT = MappingProxyType({
    ComponentType.DIGITAL_ASSET: (
        'name',
        'description',
        'asset_type',
        'primary_hosting_country_id',
        'hosting_detail',
        'url',
        'technical_owner_id',
        'business_owner_id',
        'contains_personal_data',
        'integration_status',
        'last_scanned_at',
        'discovered_via',
        'metadata',
    ),
    ComponentType.ASSET_PROCESSING_LOCATION: (
        'country_id',
        'transfer_mechanism_id',
        'location_role',
        'is_active',
    ),
    ComponentType.RECIPIENT_PROCESSING_LOCATION: (
        'country_id',
        'transfer_mechanism_id',
        'location_role',
        'is_active',
    ),
    ComponentType.DATA_PROCESSING_ACTIVITY: (
        'risk_level',
        'requires_dpia',
        'dpia_status',
        'retention_period_value',
        'retention_period_unit',
        'retention_justification',
        'status',
    ),
    ComponentType.TRANSFER_MECHANISM: (
        'name',
        'code',
        'description',
        'gdpr_article',
        'category',
        'requires_supplementary_measures',
        'is_active',
    ),
    ComponentType.DATA_SUBJECT_CATEGORY: (
        'name',
        'is_vulnerable',
        'vulnerability_reason',
        'suggests_dpia',
        'is_active',
    ),
    ComponentType.DATA_CATEGORY: (
        'name',
        'description',
        'sensitivity',
        'is_special_category',
        'is_active',
    ),
    ComponentType.PURPOSE: (
        'name',
        'description',
        'category',
        'scope',
        'is_active',
    ),
    ComponentType.LEGAL_BASIS: (
        'basis_type',
        'name',
        'framework',
        'requires_consent',
        'consent_mechanism',
        'is_active',
    ),
    ComponentType.RECIPIENT: (
        'recipient_type',
        'external_organization_id',
        'purpose',
        'description',
        'parent_recipient_id',
        'is_active',
    ),
})

# Soft-delete flag per kind; kinds without one can't be restored or deleted
ACTIVE_FLAG_BY_COMPONENT = MappingProxyType({
    ComponentType.ASSET_PROCESSING_LOCATION: 'is_active',
    ComponentType.RECIPIENT_PROCESSING_LOCATION: 'is_active',
    ComponentType.TRANSFER_MECHANISM: 'is_active',
    ComponentType.DATA_SUBJECT_CATEGORY: 'is_active',
    ComponentType.DATA_CATEGORY: 'is_active',
    ComponentType.PURPOSE: 'is_active',
    ComponentType.LEGAL_BASIS: 'is_active',
    ComponentType.RECIPIENT: 'is_active',
})

MODEL_LABEL_BY_COMPONENT = MappingProxyType({
    ComponentType.DIGITAL_ASSET: 'assets.DigitalAsset',
    ComponentType.ASSET_PROCESSING_LOCATION: 'assets.AssetProcessingLocation',
    ComponentType.RECIPIENT_PROCESSING_LOCATION: 'recipients.RecipientProcessingLocation',
    ComponentType.DATA_PROCESSING_ACTIVITY: 'activities.DataProcessingActivity',
    ComponentType.TRANSFER_MECHANISM: 'reference.TransferMechanism',
    ComponentType.DATA_SUBJECT_CATEGORY: 'taxonomy.DataSubjectCategory',
    ComponentType.DATA_CATEGORY: 'taxonomy.DataCategory',
    ComponentType.PURPOSE: 'taxonomy.Purpose',
    ComponentType.LEGAL_BASIS: 'taxonomy.LegalBasis',
    ComponentType.RECIPIENT: 'recipients.Recipient',
})

# Relations loaded alongside the row so snapshots can denormalize them
RELATED_BY_COMPONENT = MappingProxyType({
    ComponentType.ASSET_PROCESSING_LOCATION: ('country', 'transfer_mechanism'),
    ComponentType.RECIPIENT_PROCESSING_LOCATION: ('country', 'transfer_mechanism'),
})


def fields(component_type):
    """Tracked attribute names for a kind, in declared order. Empty for unknown kinds."""
    return TRACKED_FIELDS_BY_COMPONENT.get(component_type, ())


def active_flag(component_type):
    return ACTIVE_FLAG_BY_COMPONENT.get(component_type)


def related(component_type):
    return RELATED_BY_COMPONENT.get(component_type, ())


def is_tracked(component_type):
    return component_type in TRACKED_FIELDS_BY_COMPONENT


def model_for(component_type):
    """Resolve the Django model class for a kind, or None when it isn't tracked"""
    label = MODEL_LABEL_BY_COMPONENT.get(component_type)
    if label is None:
        return None
    from django.apps import apps
    return apps.get_model(label)
