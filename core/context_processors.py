# core/context_processors.py
from django.conf import settings


def site_settings(request):
    """Site-wide values used by the header and footer."""
    return {
        'SITE_NAME': settings.SITE_NAME,
    }
