# api/urls.py - admin API

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

router = DefaultRouter()
router.register(r'donors', views.DonorViewSet, basename='donor')
router.register(r'requests', views.BloodRequestViewSet, basename='blood-request')
router.register(r'matches', views.MatchViewSet, basename='match')

app_name = 'api'

urlpatterns = [
    path('', include(router.urls)),
    path('stats/', views.stats, name='stats'),
    path('trigger-matches/', views.trigger_matches, name='trigger-matches'),
]

# Available endpoints (prefix /api/admin/):
# GET  donors/            - List donors (?blood_type=A+)
# GET  requests/          - List blood requests (?status=Pending)
# GET  matches/           - List matches (?status=pending)
# GET  stats/             - Dashboard statistics
# POST trigger-matches/   - Run match detection
