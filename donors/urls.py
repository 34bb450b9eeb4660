from django.urls import path
from donors import views

app_name = 'donors'

urlpatterns = [
    path('availability/', views.update_availability, name='update_availability'),
    path('history/', views.donation_history, name='donation_history'),
]
