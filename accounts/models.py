from django.contrib.auth.models import AbstractUser
from django.db import models


class Role(models.TextChoices):
    UNSET = 'unset', 'Not selected'
    DONOR = 'donor', 'Donor'
    REQUESTER = 'requester', 'Requester'
    ADMIN = 'admin', 'Admin'


class BloodType(models.TextChoices):
    A_POS = 'A+', 'A+'
    A_NEG = 'A-', 'A-'
    B_POS = 'B+', 'B+'
    B_NEG = 'B-', 'B-'
    AB_POS = 'AB+', 'AB+'
    AB_NEG = 'AB-', 'AB-'
    O_POS = 'O+', 'O+'
    O_NEG = 'O-', 'O-'


class MatchStatus:
    """Labels stored in CustomUser.match_status"""
    AVAILABLE = 'Available'
    UNAVAILABLE = 'Unavailable'
    MATCHED = 'Matched'


class CustomUser(AbstractUser):
    role = models.CharField(
        max_length=15,
        choices=Role.choices,
        default=Role.UNSET
    )
    email = models.EmailField(unique=True)
    blood_type = models.CharField(max_length=3, choices=BloodType.choices)

    # Donation profile
    is_available = models.BooleanField(default=True)
    match_status = models.CharField(max_length=30, default=MatchStatus.AVAILABLE)

    # Contact information shared once a match is confirmed
    phone = models.CharField(max_length=20, blank=True)
    location = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    REQUIRED_FIELDS = ['email', 'blood_type']

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['role', 'is_available', 'match_status'], name='accounts_cu_role_4f1c2e_idx'),
        ]

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_donor(self):
        return self.role == Role.DONOR

    @property
    def is_requester(self):
        return self.role == Role.REQUESTER

    @property
    def is_eligible_donor(self) -> bool:
        """Donors take part in match detection only while available"""
        return (
            self.role == Role.DONOR
            and self.is_available
            and self.match_status == MatchStatus.AVAILABLE
        )
