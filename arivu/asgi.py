"""
ASGI config for the Arivu campus backend.

The AI endpoints are async views; serving through ASGI lets provider calls
wait on the network without holding a worker thread.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'arivu.settings')

application = get_asgi_application()
