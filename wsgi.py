"""
WSGI entry point for the LevantFlow status service.

Used by external WSGI servers and by `flask --app wsgi ...` CLI commands.
"""
import logging

from levantflow.factory import create_app
from levantflow.run import install_fatal_handlers, setup_logging

setup_logging()
install_fatal_handlers()
logger = logging.getLogger(__name__)

try:
    app = create_app()
    logger.info("✅ WSGI application instance created.")
except Exception as e:
    logger.exception("🚨 CRITICAL FAILURE in wsgi.py: %s", str(e))
    raise
