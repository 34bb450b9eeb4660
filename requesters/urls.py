from django.urls import path
from . import views

app_name = 'requesters'

urlpatterns = [
    path('requests/', views.blood_requests, name='blood_requests'),
    path('requests/<int:request_id>/cancel/', views.cancel, name='cancel_request'),
    path('matched-requests/', views.matched_requests, name='matched_requests'),
]
