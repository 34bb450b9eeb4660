from functools import wraps
from rest_framework.exceptions import PermissionDenied, NotAuthenticated
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer


def role_required(*required_roles, message=None):
    """
    Role-based decorator for DRF function views.
    Must sit below @api_view so request.user is already authenticated.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            user = request.user

            if not user or not user.is_authenticated:
                raise NotAuthenticated("Authentication required")

            if user.role not in required_roles:
                raise PermissionDenied(
                    message or f"Access denied. This endpoint is for {' or '.join(required_roles)}s only."
                )

            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['role'] = user.role
        token['username'] = user.username
        return token
