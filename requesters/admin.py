from django.contrib import admin
from .models import BloodRequest


@admin.register(BloodRequest)
class BloodRequestAdmin(admin.ModelAdmin):
    list_display = ['id', 'requester_name', 'blood_type', 'urgency', 'status', 'matched_with', 'created_at']
    list_filter = ['status', 'urgency', 'blood_type']
    search_fields = ['requester_name', 'description']
    ordering = ['-created_at']
    readonly_fields = ['matched_with', 'matched_at', 'created_at']
