"""
ASGI config for the clinicsite project.

The API is plain request/response, so the ASGI entrypoint is the
Django HTTP application and nothing else.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "clinicsite.settings")

application = get_asgi_application()
