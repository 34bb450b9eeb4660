from django.urls import path
from . import views

app_name = 'matches'

urlpatterns = [
    path('pending/', views.pending_matches, name='pending'),
    path('active/', views.active_matches, name='active'),
    path('<int:match_id>/respond/', views.respond, name='respond'),
]
