from django.contrib import admin

from .models import Criminal


@admin.register(Criminal)
class CriminalAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "alias", "gender", "is_wanted", "total_cases")
    list_filter = ("is_wanted", "gender")
    search_fields = ("name", "alias", "identifying_marks")
    readonly_fields = ("total_cases",)

    def has_delete_permission(self, request, obj=None):
        return False
