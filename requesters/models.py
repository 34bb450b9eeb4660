# requesters/models.py
from django.db import models
from django.conf import settings

from accounts.models import BloodType


class BloodRequest(models.Model):
    URGENCY_CHOICES = [
        ('low', 'Low'),
        ('medium', 'Medium'),
        ('high', 'High'),
        ('critical', 'Critical - Life Threatening'),
    ]

    STATUS_PENDING = 'Pending'
    STATUS_MATCHED = 'Matched'
    # Nothing transitions into Completed yet; donation completion is not tracked
    STATUS_COMPLETED = 'Completed'
    STATUS_CANCELLED = 'Cancelled'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_MATCHED, 'Matched'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='blood_requests'
    )
    requester_name = models.CharField(max_length=150)
    blood_type = models.CharField(max_length=3, choices=BloodType.choices)
    urgency = models.CharField(max_length=10, choices=URGENCY_CHOICES)
    description = models.TextField(blank=True)

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING)

    # Set when a match is confirmed
    matched_with = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='fulfilled_requests'
    )
    matched_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.requester_name} - {self.blood_type} ({self.urgency}, {self.status})"

    @property
    def is_pending(self):
        return self.status == self.STATUS_PENDING

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Blood Request'
        verbose_name_plural = 'Blood Requests'
        indexes = [
            models.Index(fields=['status', 'blood_type'], name='requesters__status_8a1d3b_idx'),
            models.Index(fields=['requester', 'status'], name='requesters__request_5c7e90_idx'),
        ]
