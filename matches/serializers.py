from rest_framework import serializers

from matches.models import Match
from matches.state import DECISIONS


class MatchSerializer(serializers.ModelSerializer):
    urgency = serializers.CharField(source='request.urgency', read_only=True)
    description = serializers.CharField(source='request.description', read_only=True)

    class Meta:
        model = Match
        fields = [
            'id', 'donor', 'requester', 'request',
            'donor_name', 'requester_name', 'blood_type',
            'urgency', 'description',
            'status', 'donor_response', 'requester_response',
            'created_at', 'expires_at', 'donor_responded_at', 'requester_responded_at',
            'donor_info', 'requester_info',
        ]
        read_only_fields = fields


class MatchResponseSerializer(serializers.Serializer):
    response = serializers.ChoiceField(choices=DECISIONS)
