from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Role, Staff, User


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ("name", "description")
    search_fields = ("name",)
    ordering = ("name",)


@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    list_display = ("name", "badge_number", "pol_rank", "department", "is_active", "join_date")
    search_fields = ("name", "badge_number")
    list_filter = ("is_active", "department")

    # Staff rows are deactivated, never removed.
    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("username", "role", "staff", "created_at", "last_login")
    search_fields = ("username", "staff__name", "staff__badge_number")
    list_filter = ("role", "staff__is_active")
    readonly_fields = ("created_at", "last_login")
    fieldsets = BaseUserAdmin.fieldsets + (
        ("CRMS", {"fields": ("role", "staff", "created_at")}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("CRMS", {"fields": ("role", "staff")}),
    )

    def has_delete_permission(self, request, obj=None):
        return False
