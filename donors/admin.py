from django.contrib import admin
from .models import DonationHistory


@admin.register(DonationHistory)
class DonationHistoryAdmin(admin.ModelAdmin):
    list_display = ['donor_name', 'requester_name', 'blood_type', 'status', 'date']
    list_filter = ['blood_type', 'date']
    search_fields = ['donor_name', 'requester_name']
    ordering = ['-date']
    readonly_fields = ['donor', 'requester', 'match', 'donor_name', 'requester_name', 'blood_type', 'status', 'date']

    def has_change_permission(self, request, obj=None):
        return False
