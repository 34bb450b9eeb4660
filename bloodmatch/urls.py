from django.contrib import admin
from django.urls import path, include
from . import views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health/', views.health, name='health'),

    # Apps
    path('api/auth/', include('accounts.urls')),
    path('api/donor/', include('donors.urls')),
    path('api/requester/', include('requesters.urls')),
    path('api/matches/', include('matches.urls')),
    path('api/notifications/', include('notifications.urls')),
    path('api/admin/', include('api.urls')),
]
