"""
Celery configuration for background matching tasks.
The periodic schedule lives in settings.CELERY_BEAT_SCHEDULE.
"""
import os
from celery import Celery

# Set default Django settings
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bloodmatch.settings')

# Create Celery app
app = Celery('bloodmatch')

# Load config from Django settings (prefix: CELERY_)
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks in all installed apps
app.autodiscover_tasks()
