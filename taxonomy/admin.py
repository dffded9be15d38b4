from django.contrib import admin
from .models import DataSubjectCategory, DataCategory, Purpose, LegalBasis


@admin.register(DataSubjectCategory)
class DataSubjectCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'organization', 'is_vulnerable', 'suggests_dpia', 'is_active']
    list_filter = ['is_vulnerable', 'is_active']
    search_fields = ['name']


@admin.register(DataCategory)
class DataCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'organization', 'sensitivity', 'is_special_category', 'is_active']
    list_filter = ['sensitivity', 'is_special_category', 'is_active']
    search_fields = ['name']


@admin.register(Purpose)
class PurposeAdmin(admin.ModelAdmin):
    list_display = ['name', 'organization', 'category', 'scope', 'is_active']
    list_filter = ['scope', 'is_active']
    search_fields = ['name', 'category']


@admin.register(LegalBasis)
class LegalBasisAdmin(admin.ModelAdmin):
    list_display = ['name', 'basis_type', 'framework', 'requires_consent', 'is_active']
    list_filter = ['basis_type', 'framework', 'is_active']
    search_fields = ['name']
