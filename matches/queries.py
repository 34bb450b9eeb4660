"""
Read-only queries for dashboards
"""
from django.contrib.auth import get_user_model
from django.db.models import Q
from django.utils import timezone

from accounts.models import MatchStatus, Role
from matches.models import Match
from notifications.models import Notification
from requesters.models import BloodRequest

User = get_user_model()

# Statuses in which each party still owes an answer
AWAITING_DONOR = (Match.Status.PENDING, Match.Status.REQUESTER_ACCEPTED)
AWAITING_REQUESTER = (Match.Status.PENDING, Match.Status.DONOR_ACCEPTED)


def pending_matches_for(user, now=None):
    """Unexpired matches waiting on this user's answer, newest first"""
    now = now or timezone.now()
    if user.role == Role.DONOR:
        matches = Match.objects.filter(donor=user, status__in=AWAITING_DONOR)
    elif user.role == Role.REQUESTER:
        matches = Match.objects.filter(requester=user, status__in=AWAITING_REQUESTER)
    else:
        return Match.objects.none()
    return matches.filter(expires_at__gt=now).select_related('request')


def active_matches_for(user):
    """Confirmed matches where the user is either party"""
    return (
        Match.objects.filter(Q(donor=user) | Q(requester=user), status=Match.Status.BOTH_ACCEPTED)
        .select_related('request')
    )


def notifications_for(user, limit=50):
    return Notification.objects.filter(user=user)[:limit]


def dashboard_stats():
    """Aggregate counts for the admin dashboard"""
    return {
        'total_users': User.objects.count(),
        'total_donors': User.objects.filter(role=Role.DONOR).count(),
        'total_requesters': User.objects.filter(role=Role.REQUESTER).count(),
        'available_donors': User.objects.filter(
            role=Role.DONOR,
            is_available=True,
            match_status=MatchStatus.AVAILABLE,
        ).count(),
        'total_requests': BloodRequest.objects.count(),
        'pending_requests': BloodRequest.objects.filter(status=BloodRequest.STATUS_PENDING).count(),
        'matched_requests': BloodRequest.objects.filter(status=BloodRequest.STATUS_MATCHED).count(),
        'cancelled_requests': BloodRequest.objects.filter(status=BloodRequest.STATUS_CANCELLED).count(),
        'total_matches': Match.objects.count(),
        'pending_matches': Match.objects.filter(status__in=Match.OPEN_STATUSES).count(),
        'successful_matches': Match.objects.filter(status=Match.Status.BOTH_ACCEPTED).count(),
        'expired_matches': Match.objects.filter(status=Match.Status.EXPIRED).count(),
        'rejected_matches': Match.objects.filter(
            status__in=[Match.Status.DONOR_REJECTED, Match.Status.REQUESTER_REJECTED]
        ).count(),
    }
