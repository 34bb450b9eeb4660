from rest_framework import serializers

from accounts.models import BloodType
from .models import BloodRequest


class BloodRequestSerializer(serializers.ModelSerializer):
    matched_with_name = serializers.CharField(source='matched_with.username', read_only=True, default=None)

    class Meta:
        model = BloodRequest
        fields = [
            'id', 'requester', 'requester_name', 'blood_type', 'urgency', 'description',
            'status', 'matched_with', 'matched_with_name', 'matched_at', 'created_at',
        ]
        read_only_fields = fields


class CreateBloodRequestSerializer(serializers.Serializer):
    blood_type = serializers.ChoiceField(choices=BloodType.choices)
    urgency = serializers.ChoiceField(choices=BloodRequest.URGENCY_CHOICES)
    description = serializers.CharField(required=False, allow_blank=True, default='')
