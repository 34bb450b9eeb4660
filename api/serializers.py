# api/serializers.py - admin listings

from rest_framework import serializers

from accounts.serializers import UserSerializer
from matches.serializers import MatchSerializer
from requesters.serializers import BloodRequestSerializer


class AdminDonorSerializer(UserSerializer):
    """Donor with live matching counters"""
    active_matches = serializers.IntegerField(read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['active_matches']
        read_only_fields = fields


class AdminBloodRequestSerializer(BloodRequestSerializer):
    match_count = serializers.IntegerField(read_only=True)

    class Meta(BloodRequestSerializer.Meta):
        fields = BloodRequestSerializer.Meta.fields + ['match_count']
        read_only_fields = fields


class AdminMatchSerializer(MatchSerializer):
    donor_email = serializers.EmailField(source='donor.email', read_only=True)
    requester_email = serializers.EmailField(source='requester.email', read_only=True)

    class Meta(MatchSerializer.Meta):
        fields = MatchSerializer.Meta.fields + ['donor_email', 'requester_email']
        read_only_fields = fields
