from django.conf import settings
from django.db import models


class Notification(models.Model):
    NOTIFICATION_TYPES = (
        ('match_request', 'Match Request'),
        ('match_accepted', 'Match Accepted'),
        ('match_rejected', 'Match Rejected'),
        ('reminder', 'Reminder'),
        ('request_cancelled', 'Request Cancelled'),
        ('request_fulfilled', 'Request Fulfilled'),
        ('match_expired', 'Match Expired'),
    )

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='notifications')
    title = models.CharField(max_length=255)
    message = models.TextField()
    notification_type = models.CharField(max_length=50, choices=NOTIFICATION_TYPES)
    is_read = models.BooleanField(default=False)
    data = models.JSONField(default=dict, blank=True)  # Echo of match/request fields
    match = models.ForeignKey(
        'matches.Match',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    read_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notificatio_user_id_0f5a7c_idx'),
            models.Index(fields=['created_at'], name='notificatio_created_3e8b21_idx'),
            models.Index(fields=['notification_type'], name='notificatio_notific_b6d4f9_idx'),
        ]

    def __str__(self):
        return f"{self.title} - {self.user.username}"
