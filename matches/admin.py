from django.contrib import admin
from .models import Match
from .reaper import expire_stale_matches


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = [
        'id', 'donor_name', 'requester_name', 'blood_type', 'status',
        'donor_response', 'requester_response', 'expires_at',
    ]
    list_filter = ['status', 'blood_type', 'donor_response', 'requester_response']
    search_fields = ['donor_name', 'requester_name']
    ordering = ['-created_at']
    readonly_fields = [
        'donor', 'requester', 'request', 'donor_name', 'requester_name', 'blood_type',
        'status', 'donor_response', 'requester_response', 'created_at', 'expires_at',
        'donor_responded_at', 'requester_responded_at', 'donor_info', 'requester_info',
    ]

    actions = ['run_expiry_sweep']

    @admin.action(description='Run the expiry sweep now')
    def run_expiry_sweep(self, request, queryset):
        expired = expire_stale_matches()
        self.message_user(request, f'{expired} match(es) expired.')
