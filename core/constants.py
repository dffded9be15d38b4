"""
Application-wide constants.
Centralized constants following DRY principle.
"""

# User Roles
class UserRole:
    ADMIN = 'ADMIN'
    MEMBER = 'MEMBER'

    CHOICES = [
        (ADMIN, 'Admin'),
        (MEMBER, 'Member'),
    ]


# Organization Plans
class OrganizationPlan:
    FREE = 'FREE'
    PRO = 'PRO'
    ENTERPRISE = 'ENTERPRISE'

    CHOICES = [
        (FREE, 'Free'),
        (PRO, 'Pro'),
        (ENTERPRISE, 'Enterprise'),
    ]


# Change log: type of audited transition
class ChangeType:
    CREATED = 'CREATED'
    UPDATED = 'UPDATED'
    RESTORED = 'RESTORED'
    DELETED = 'DELETED'

    CHOICES = [
        (CREATED, 'Created'),
        (UPDATED, 'Updated'),
        (RESTORED, 'Restored'),
        (DELETED, 'Deleted'),
    ]

    # Transitions describing the whole entity (no field name)
    WHOLE_ENTITY = (CREATED, RESTORED, DELETED)


# Change log: component kind tags
class ComponentType:
    DIGITAL_ASSET = 'DigitalAsset'
    ASSET_PROCESSING_LOCATION = 'AssetProcessingLocation'
    RECIPIENT_PROCESSING_LOCATION = 'RecipientProcessingLocation'
    DATA_PROCESSING_ACTIVITY = 'DataProcessingActivity'
    TRANSFER_MECHANISM = 'TransferMechanism'
    DATA_SUBJECT_CATEGORY = 'DataSubjectCategory'
    DATA_CATEGORY = 'DataCategory'
    PURPOSE = 'Purpose'
    LEGAL_BASIS = 'LegalBasis'
    RECIPIENT = 'Recipient'

    CHOICES = [
        (DIGITAL_ASSET, 'Digital Asset'),
        (ASSET_PROCESSING_LOCATION, 'Asset Processing Location'),
        (RECIPIENT_PROCESSING_LOCATION, 'Recipient Processing Location'),
        (DATA_PROCESSING_ACTIVITY, 'Data Processing Activity'),
        (TRANSFER_MECHANISM, 'Transfer Mechanism'),
        (DATA_SUBJECT_CATEGORY, 'Data Subject Category'),
        (DATA_CATEGORY, 'Data Category'),
        (PURPOSE, 'Purpose'),
        (LEGAL_BASIS, 'Legal Basis'),
        (RECIPIENT, 'Recipient'),
    ]

    LOCATIONS = (ASSET_PROCESSING_LOCATION, RECIPIENT_PROCESSING_LOCATION)


# Processing location roles
class LocationRole:
    HOSTING = 'HOSTING'
    PROCESSING = 'PROCESSING'
    BOTH = 'BOTH'

    CHOICES = [
        (HOSTING, 'Hosting'),
        (PROCESSING, 'Processing'),
        (BOTH, 'Hosting and Processing'),
    ]


# Country GDPR status tags
class GdprStatus:
    EU = 'EU'
    EEA = 'EEA'
    ADEQUATE = 'ADEQUATE'
    THIRD = 'THIRD'


# Transfer mechanism categories
class TransferMechanismCategory:
    ADEQUACY = 'ADEQUACY'
    SAFEGUARD = 'SAFEGUARD'
    DEROGATION = 'DEROGATION'
    NONE = 'NONE'

    CHOICES = [
        (ADEQUACY, 'Adequacy Decision'),
        (SAFEGUARD, 'Appropriate Safeguard'),
        (DEROGATION, 'Derogation'),
        (NONE, 'None'),
    ]


# Digital asset types
class AssetType:
    DATABASE = 'DATABASE'
    APPLICATION = 'APPLICATION'
    CLOUD_SERVICE = 'CLOUD_SERVICE'
    FILE_STORAGE = 'FILE_STORAGE'
    ANALYTICS_PLATFORM = 'ANALYTICS_PLATFORM'
    OTHER = 'OTHER'

    CHOICES = [
        (DATABASE, 'Database'),
        (APPLICATION, 'Application'),
        (CLOUD_SERVICE, 'Cloud Service'),
        (FILE_STORAGE, 'File Storage'),
        (ANALYTICS_PLATFORM, 'Analytics Platform'),
        (OTHER, 'Other'),
    ]


class IntegrationStatus:
    NOT_INTEGRATED = 'NOT_INTEGRATED'
    MANUAL_ONLY = 'MANUAL_ONLY'
    CONNECTED = 'CONNECTED'
    FAILED = 'FAILED'

    CHOICES = [
        (NOT_INTEGRATED, 'Not Integrated'),
        (MANUAL_ONLY, 'Manual Only'),
        (CONNECTED, 'Connected'),
        (FAILED, 'Failed'),
    ]


# Processing activity classifications
class RiskLevel:
    LOW = 'LOW'
    MEDIUM = 'MEDIUM'
    HIGH = 'HIGH'
    CRITICAL = 'CRITICAL'

    CHOICES = [
        (LOW, 'Low'),
        (MEDIUM, 'Medium'),
        (HIGH, 'High'),
        (CRITICAL, 'Critical'),
    ]


class DpiaStatus:
    NOT_STARTED = 'NOT_STARTED'
    IN_PROGRESS = 'IN_PROGRESS'
    UNDER_REVIEW = 'UNDER_REVIEW'
    APPROVED = 'APPROVED'
    OUTDATED = 'OUTDATED'

    CHOICES = [
        (NOT_STARTED, 'Not Started'),
        (IN_PROGRESS, 'In Progress'),
        (UNDER_REVIEW, 'Under Review'),
        (APPROVED, 'Approved'),
        (OUTDATED, 'Outdated'),
    ]


class ActivityStatus:
    DRAFT = 'DRAFT'
    UNDER_REVIEW = 'UNDER_REVIEW'
    ACTIVE = 'ACTIVE'
    SUSPENDED = 'SUSPENDED'
    ARCHIVED = 'ARCHIVED'

    CHOICES = [
        (DRAFT, 'Draft'),
        (UNDER_REVIEW, 'Under Review'),
        (ACTIVE, 'Active'),
        (SUSPENDED, 'Suspended'),
        (ARCHIVED, 'Archived'),
    ]


class RetentionUnit:
    DAYS = 'DAYS'
    MONTHS = 'MONTHS'
    YEARS = 'YEARS'

    CHOICES = [
        (DAYS, 'Days'),
        (MONTHS, 'Months'),
        (YEARS, 'Years'),
    ]


# Taxonomy classifications
class Sensitivity:
    PUBLIC = 'PUBLIC'
    INTERNAL = 'INTERNAL'
    CONFIDENTIAL = 'CONFIDENTIAL'
    RESTRICTED = 'RESTRICTED'

    CHOICES = [
        (PUBLIC, 'Public'),
        (INTERNAL, 'Internal'),
        (CONFIDENTIAL, 'Confidential'),
        (RESTRICTED, 'Restricted'),
    ]


class PurposeScope:
    INTERNAL = 'INTERNAL'
    EXTERNAL = 'EXTERNAL'
    BOTH = 'BOTH'

    CHOICES = [
        (INTERNAL, 'Internal'),
        (EXTERNAL, 'External'),
        (BOTH, 'Both'),
    ]


class LegalBasisType:
    CONSENT = 'CONSENT'
    CONTRACT = 'CONTRACT'
    LEGAL_OBLIGATION = 'LEGAL_OBLIGATION'
    VITAL_INTERESTS = 'VITAL_INTERESTS'
    PUBLIC_TASK = 'PUBLIC_TASK'
    LEGITIMATE_INTERESTS = 'LEGITIMATE_INTERESTS'

    CHOICES = [
        (CONSENT, 'Consent'),
        (CONTRACT, 'Contract'),
        (LEGAL_OBLIGATION, 'Legal Obligation'),
        (VITAL_INTERESTS, 'Vital Interests'),
        (PUBLIC_TASK, 'Public Task'),
        (LEGITIMATE_INTERESTS, 'Legitimate Interests'),
    ]


class RecipientType:
    PROCESSOR = 'PROCESSOR'
    SUB_PROCESSOR = 'SUB_PROCESSOR'
    JOINT_CONTROLLER = 'JOINT_CONTROLLER'
    THIRD_PARTY = 'THIRD_PARTY'
    INTERNAL_DEPARTMENT = 'INTERNAL_DEPARTMENT'
    PUBLIC_AUTHORITY = 'PUBLIC_AUTHORITY'

    CHOICES = [
        (PROCESSOR, 'Processor'),
        (SUB_PROCESSOR, 'Sub-processor'),
        (JOINT_CONTROLLER, 'Joint Controller'),
        (THIRD_PARTY, 'Third Party'),
        (INTERNAL_DEPARTMENT, 'Internal Department'),
        (PUBLIC_AUTHORITY, 'Public Authority'),
    ]


# Pagination
class Pagination:
    DEFAULT_PAGE_SIZE = 20
    MAX_PAGE_SIZE = 100
