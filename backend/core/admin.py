from django.contrib import admin

from .models import AuditLogEntry


@admin.register(AuditLogEntry)
class AuditLogEntryAdmin(admin.ModelAdmin):
    list_display = ("log_id", "timestamp", "user", "action", "table_name", "record_id")
    list_filter = ("action", "table_name")
    search_fields = ("user__username", "table_name")
    ordering = ("-timestamp",)
    readonly_fields = ("user", "action", "table_name", "record_id", "timestamp")

    # Append-only: the admin may browse but never edit or remove entries.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
