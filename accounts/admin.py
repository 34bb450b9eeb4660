from django.contrib import admin
from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(admin.ModelAdmin):
    list_display = ('username', 'email', 'role', 'blood_type', 'is_available', 'match_status')
    search_fields = ('username', 'email')
    list_filter = ('role', 'blood_type', 'is_available', 'match_status')
    readonly_fields = ('created_at', 'last_login', 'date_joined')
