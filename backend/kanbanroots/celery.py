import os
from dotenv import load_dotenv
load_dotenv()  # settings.py reads the same .env
from celery import Celery

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'kanbanroots.settings')

app = Celery('kanbanroots')

# namespace='CELERY' means all celery-related configuration keys
# should have a `CELERY_` prefix.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks(related_name='celery_tasks')
