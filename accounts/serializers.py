# accounts/serializers.py
from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import BloodType, Role

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    is_donor = serializers.BooleanField(read_only=True)
    is_requester = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'role', 'blood_type',
            'is_available', 'match_status', 'is_donor', 'is_requester',
            'phone', 'location', 'created_at',
        ]
        read_only_fields = fields


class SignupSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)
    username = serializers.CharField(min_length=3, max_length=150)
    blood_type = serializers.ChoiceField(choices=BloodType.choices)

    class Meta:
        model = User
        fields = ['username', 'email', 'password', 'blood_type', 'phone', 'location']

    def validate_username(self, value):
        value = value.strip()
        if User.objects.filter(username=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("Email already registered")
        return value

    def create(self, validated_data):
        # Role stays unset until the user picks one
        return User.objects.create_user(role=Role.UNSET, **validated_data)


class UpdateRoleSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=[Role.DONOR, Role.REQUESTER])
    blood_type = serializers.ChoiceField(choices=BloodType.choices, required=False)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=20)
    location = serializers.CharField(required=False, allow_blank=True, max_length=255)
