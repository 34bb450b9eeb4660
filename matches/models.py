# matches/models.py
import math

from django.conf import settings
from django.db import models
from django.utils import timezone

# Parties to a match
DONOR = 'donor'
REQUESTER = 'requester'


class Match(models.Model):
    """
    A time-bounded proposal pairing one donor with one blood request.
    Each party answers independently; the overall status is derived from
    both answers (see matches.state.derive_status).
    """

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        DONOR_ACCEPTED = 'donor_accepted', 'Donor Accepted'
        REQUESTER_ACCEPTED = 'requester_accepted', 'Requester Accepted'
        BOTH_ACCEPTED = 'both_accepted', 'Both Accepted'
        DONOR_REJECTED = 'donor_rejected', 'Donor Rejected'
        REQUESTER_REJECTED = 'requester_rejected', 'Requester Rejected'
        EXPIRED = 'expired', 'Expired'

    class Response(models.TextChoices):
        PENDING = 'pending', 'Pending'
        ACCEPTED = 'accepted', 'Accepted'
        REJECTED = 'rejected', 'Rejected'

    # Still waiting on at least one party
    OPEN_STATUSES = (Status.PENDING, Status.DONOR_ACCEPTED, Status.REQUESTER_ACCEPTED)
    # At most one per (donor, request)
    ACTIVE_STATUSES = OPEN_STATUSES + (Status.BOTH_ACCEPTED,)
    TERMINAL_STATUSES = (
        Status.BOTH_ACCEPTED,
        Status.DONOR_REJECTED,
        Status.REQUESTER_REJECTED,
        Status.EXPIRED,
    )

    donor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='donor_matches'
    )
    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='requester_matches'
    )
    request = models.ForeignKey(
        'requesters.BloodRequest',
        on_delete=models.PROTECT,
        related_name='matches'
    )

    # Snapshots taken at creation time
    donor_name = models.CharField(max_length=150)
    requester_name = models.CharField(max_length=150)
    blood_type = models.CharField(max_length=3)

    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    donor_response = models.CharField(max_length=10, choices=Response.choices, default=Response.PENDING)
    requester_response = models.CharField(max_length=10, choices=Response.choices, default=Response.PENDING)

    created_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField()
    donor_responded_at = models.DateTimeField(null=True, blank=True)
    requester_responded_at = models.DateTimeField(null=True, blank=True)

    # Contact details, populated only once both parties accept
    donor_info = models.JSONField(default=dict, blank=True)
    requester_info = models.JSONField(default=dict, blank=True)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name_plural = 'Matches'
        constraints = [
            models.UniqueConstraint(
                fields=['donor', 'request'],
                condition=models.Q(status__in=[
                    'pending', 'donor_accepted', 'requester_accepted', 'both_accepted',
                ]),
                name='unique_active_match_per_donor_request',
            ),
        ]
        indexes = [
            models.Index(fields=['status', 'expires_at'], name='matches_mat_status_2b9f41_idx'),
            models.Index(fields=['request', 'status'], name='matches_mat_request_7d3a52_idx'),
            models.Index(fields=['donor', 'status'], name='matches_mat_donor_i_91c6e0_idx'),
            models.Index(fields=['requester', 'status'], name='matches_mat_request_e40b18_idx'),
        ]

    def __str__(self):
        return f"Match #{self.pk}: {self.donor_name} -> {self.requester_name} ({self.status})"

    @property
    def is_active(self):
        return self.status in self.ACTIVE_STATUSES

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    def is_past_deadline(self, now=None):
        return (now or timezone.now()) > self.expires_at

    def hours_remaining(self, now=None):
        """Whole hours left before expiry, rounded up"""
        seconds = (self.expires_at - (now or timezone.now())).total_seconds()
        return max(0, math.ceil(seconds / 3600))

    def party_for(self, user_id):
        """'donor', 'requester' or None for a user id"""
        if str(user_id) == str(self.donor_id):
            return DONOR
        if str(user_id) == str(self.requester_id):
            return REQUESTER
        return None
