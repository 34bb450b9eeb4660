from django.db import models
from django.conf import settings


class DonationHistory(models.Model):
    """
    Permanent record of a confirmed match. Names and blood type are
    snapshots so the record outlives changes to the user accounts.
    """
    STATUS_MATCHED = 'Matched'

    donor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='donation_history'
    )
    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='received_donations'
    )
    match = models.OneToOneField(
        'matches.Match',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='history'
    )

    donor_name = models.CharField(max_length=150)
    requester_name = models.CharField(max_length=150)
    blood_type = models.CharField(max_length=3)
    status = models.CharField(max_length=20, default=STATUS_MATCHED)

    date = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.donor_name} -> {self.requester_name} | {self.date:%Y-%m-%d}"

    class Meta:
        ordering = ['-date']
        verbose_name = "Donation History"
        verbose_name_plural = "Donation Histories"
