"""
Celery configuration for the car rental project.
"""
import os

from celery import Celery
from celery.schedules import crontab

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

app = Celery('car_rental')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

app.conf.beat_schedule = {
    'refresh-rented-cars-every-5-minutes': {
        'task': 'apps.cars.tasks.refresh_rented_cars',
        'schedule': crontab(minute='*/5'),
    },
}
