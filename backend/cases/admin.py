from django.contrib import admin

from .models import FIR, Case, CrimeCategory


class FIRInline(admin.StackedInline):
    model = FIR
    extra = 0
    can_delete = False


@admin.register(CrimeCategory)
class CrimeCategoryAdmin(admin.ModelAdmin):
    list_display = ("crime_name", "ipc_section", "severity_level")
    list_filter = ("severity_level",)
    search_fields = ("crime_name", "ipc_section")


@admin.register(Case)
class CaseAdmin(admin.ModelAdmin):
    list_display = ("id", "fir_number", "crime_type", "status",
                    "city", "district", "date_reported")
    list_filter = ("status", "crime_type")
    search_fields = ("fir_number", "city", "district", "description")
    raw_id_fields = ("primary_accused",)
    inlines = [FIRInline]

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(FIR)
class FIRAdmin(admin.ModelAdmin):
    list_display = ("fir_number", "complainant_name", "police_station", "date_filed")
    search_fields = ("fir_number", "complainant_name")

    def has_delete_permission(self, request, obj=None):
        return False
