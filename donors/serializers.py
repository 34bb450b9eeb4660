# donors/serializers.py
from rest_framework import serializers
from .models import DonationHistory


class AvailabilitySerializer(serializers.Serializer):
    is_available = serializers.BooleanField()


class DonationHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = DonationHistory
        fields = ['id', 'donor', 'requester', 'match', 'donor_name', 'requester_name', 'blood_type', 'status', 'date']
        read_only_fields = fields
