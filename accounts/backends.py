# accounts/backends.py
from django.contrib.auth.backends import ModelBackend
from django.contrib.auth import get_user_model
from django.db.models import Q

User = get_user_model()


class EmailBackend(ModelBackend):
    """
    Lets users sign in with either their username or their email address.
    Emails are stored lowercased, so the lookup lowercases the identifier too.
    """
    def authenticate(self, request, username=None, password=None, **kwargs):
        if username is None or password is None:
            return None

        identifier = username.strip()
        candidates = list(User.objects.filter(Q(username=identifier) | Q(email=identifier.lower())))
        # A username match wins over an email match
        candidates.sort(key=lambda u: u.username != identifier)
        user = candidates[0] if candidates else None
        if user is None:
            # Run the default password hasher once to reduce timing attack
            User().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
