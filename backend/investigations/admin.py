from django.contrib import admin

from .models import Investigation


@admin.register(Investigation)
class InvestigationAdmin(admin.ModelAdmin):
    list_display = ("id", "case", "assigned_to", "status", "last_updated")
    list_filter = ("status",)
    search_fields = ("case__fir_number", "assigned_to__name", "progress_notes")
    raw_id_fields = ("case", "assigned_to")

    def has_delete_permission(self, request, obj=None):
        return False
