from django.contrib import admin, messages
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from django.utils.html import format_html

from .access_policy import AccessPolicy
from .models import Role, User


ROLE_BADGE_COLORS = {
    Role.Name.SUPER_ADMIN: "#d97706",
    Role.Name.ADMIN: "#2563eb",
    Role.Name.HR: "#0ea5e9",
    Role.Name.EMPLOYEE: "#059669",
}


def can_manage_users(user):
    return AccessPolicy.is_admin_like(user)


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ("name", "level", "description")
    ordering = ("-level",)
    search_fields = ("name",)

    def has_module_permission(self, request):
        return AccessPolicy.is_super_admin(request.user)

    def has_view_permission(self, request, obj=None):
        return AccessPolicy.is_super_admin(request.user)

    def has_change_permission(self, request, obj=None):
        return AccessPolicy.is_super_admin(request.user)


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = (
        "username",
        "full_name_display",
        "role_badge",
        "status_badge",
    )
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("username", "first_name", "last_name", "email", "phone")
    ordering = ("id",)
    list_select_related = ("role",)
    readonly_fields = ("last_login", "date_joined")
    filter_horizontal = ()

    fieldsets = (
        ("Account", {"fields": ("username", "password")}),
        ("Personal data", {"fields": ("first_name", "last_name", "email", "phone")}),
        ("Role", {"fields": ("role",)}),
        ("Access", {"fields": ("is_active", "is_staff")}),
        (
            "System fields",
            {
                "fields": ("last_login", "date_joined"),
                "classes": ("collapse",),
            },
        ),
    )

    add_fieldsets = (
        (
            "Create user",
            {
                "classes": ("wide",),
                "fields": (
                    "username",
                    "password1",
                    "password2",
                    "first_name",
                    "last_name",
                    "email",
                    "role",
                    "is_active",
                    "is_staff",
                ),
            },
        ),
    )

    exclude = ("groups", "user_permissions", "is_superuser")
    actions = ("set_active", "set_inactive")

    @admin.display(description="Full name")
    def full_name_display(self, obj):
        full_name = f"{obj.first_name or ''} {obj.last_name or ''}".strip()
        return full_name or "-"

    @admin.display(description="Role")
    def role_badge(self, obj):
        role_name = obj.role.name if obj.role_id else "-"
        color = ROLE_BADGE_COLORS.get(role_name, "#64748b")
        return format_html(
            '<span style="padding:4px 10px;border-radius:999px;background:{}22;color:{};font-weight:600;">{}</span>',
            color,
            color,
            role_name,
        )

    @admin.display(description="Status")
    def status_badge(self, obj):
        if obj.is_active:
            return format_html('<span style="color:#16a34a;font-weight:600;">● Active</span>')
        return format_html('<span style="color:#64748b;font-weight:600;">● Inactive</span>')

    @admin.action(description="Mark as active")
    def set_active(self, request, queryset):
        updated = queryset.update(is_active=True)
        self.message_user(request, f"Users activated: {updated}")

    @admin.action(description="Mark as inactive")
    def set_inactive(self, request, queryset):
        updated = queryset.update(is_active=False)
        self.message_user(request, f"Users deactivated: {updated}", level=messages.WARNING)

    def has_module_permission(self, request):
        return can_manage_users(request.user)

    def has_view_permission(self, request, obj=None):
        return can_manage_users(request.user)

    def has_add_permission(self, request):
        return can_manage_users(request.user)

    def has_change_permission(self, request, obj=None):
        return can_manage_users(request.user)

    def has_delete_permission(self, request, obj=None):
        return AccessPolicy.is_super_admin(request.user)
