from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from .models import (
    Role, Quota, Department, College, DayScholarHosteller, User, GatePass,
)


class UserCreateAdminForm(UserCreationForm):
    class Meta(UserCreationForm.Meta):
        model = User
        fields = ('email', 'name')


class UserChangeAdminForm(UserChangeForm):
    class Meta(UserChangeForm.Meta):
        model = User
        fields = '__all__'


@admin.register(Role, Quota, Department, College)
class ReferenceAdmin(admin.ModelAdmin):
    list_display = ['name']
    search_fields = ['name']


@admin.register(DayScholarHosteller)
class DayScholarHostellerAdmin(admin.ModelAdmin):
    list_display = ['type']
    search_fields = ['type']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = UserChangeAdminForm
    add_form = UserCreateAdminForm

    list_display = ['email', 'name', 'sin_number', 'role', 'department', 'year', 'is_active']
    list_filter = ['role', 'department', 'college', 'quota', 'dayscholar_hosteller', 'is_active', 'is_staff']
    search_fields = ['email', 'name', 'sin_number', 'phone']
    ordering = ['id']

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Personal info', {'fields': ('name', 'sin_number', 'father_name', 'phone')}),
        ('Campus', {'fields': ('role', 'department', 'college', 'quota', 'dayscholar_hosteller', 'year', 'batch')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Important dates', {'fields': ('last_login', 'created_at')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['last_login', 'created_at']


@admin.register(GatePass)
class GatePassAdmin(admin.ModelAdmin):
    list_display = ['id', 'student', 'department', 'status', 'out_time', 'in_time', 'approved_by']
    list_filter = ['status', 'department']
    search_fields = ['student__name', 'student__email', 'student__sin_number', 'reason']
    autocomplete_fields = ['student', 'approved_by']
    readonly_fields = ['decided_at', 'created_at', 'updated_at']
    date_hierarchy = 'out_time'
