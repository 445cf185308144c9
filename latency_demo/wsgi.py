"""
WSGI config for the latency demo project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'latency_demo.settings')

application = get_wsgi_application()
