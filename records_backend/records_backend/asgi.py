import os
from django.core.asgi import get_asgi_application

import logging
from django.conf import settings

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "records_backend.settings")
logger = logging.getLogger("django")

application = get_asgi_application()

logger.debug("ASGI application initialized")
logger.debug(f"Setting DEBUG is set to: {settings.DEBUG}")
