from django.urls import path
from . import views
from rest_framework_simplejwt.views import TokenRefreshView

app_name = 'accounts'

urlpatterns = [
    path('signup/', views.signup, name='signup'),
    path('login/', views.login, name='login'),
    path('profile/', views.profile, name='profile'),
    path('update-role/', views.update_role, name='update_role'),

    # JWT token management
    path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
]
