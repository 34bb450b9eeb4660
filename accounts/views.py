import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from accounts.decorators import CustomTokenObtainPairSerializer
from accounts.serializers import SignupSerializer, UpdateRoleSerializer, UserSerializer

logger = logging.getLogger(__name__)


# -----------------------------
# HELPER: JWT TOKEN GENERATOR
# -----------------------------
def get_tokens_for_user(user):
    """
    Generate JWT tokens and embed role in payload
    """
    refresh = CustomTokenObtainPairSerializer.get_token(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


# -----------------------------
# SIGNUP API
# -----------------------------
@api_view(['POST'])
@permission_classes([AllowAny])
def signup(request):
    """
    Registers a user without a role and returns JWT tokens.
    The role is chosen afterwards through update_role.
    """
    serializer = SignupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.save()

    logger.info("New user signed up: %s", user.username)

    return Response(
        {
            "message": "Registration successful",
            "tokens": get_tokens_for_user(user),
            "user": UserSerializer(user).data,
        },
        status=status.HTTP_201_CREATED
    )


# -----------------------------
# LOGIN API
# -----------------------------
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """
    Accepts username or email plus password
    """
    identifier = request.data.get('username') or request.data.get('email')
    password = request.data.get('password')

    if not identifier or not password:
        return Response({"detail": "Username/email and password are required"}, status=400)

    user = authenticate(request, username=identifier, password=password)
    if user is None:
        raise AuthenticationFailed("Invalid credentials")

    return Response({
        "message": "Login successful",
        "tokens": get_tokens_for_user(user),
        "user": UserSerializer(user).data,
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def profile(request):
    return Response(UserSerializer(request.user).data)


# -----------------------------
# ROLE SELECTION
# -----------------------------
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def update_role(request):
    """
    Role selection after signup. Returns fresh tokens because the role
    is embedded in the token payload.
    """
    serializer = UpdateRoleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = request.user
    update_fields = []
    for field, value in serializer.validated_data.items():
        setattr(user, field, value)
        update_fields.append(field)
    user.save(update_fields=update_fields)

    logger.info("Role updated for %s: %s", user.username, user.role)

    return Response({
        "tokens": get_tokens_for_user(user),
        "user": UserSerializer(user).data,
    })
