# src/levantflow/run.py
import os
import sys
import logging
import platform
import threading
from logging.handlers import RotatingFileHandler

from .config import Config
from .factory import create_app
from .metrics import isoformat
from .server import StatusServer
from .state import get_state

logger = logging.getLogger(__name__)


# --- Logging Setup ---
def setup_logging(config=Config) -> None:
    root = logging.getLogger()
    if root.hasHandlers():
        return  # avoid duplicate handlers
    root.setLevel(config.LOG_LEVEL)

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    # Console handler
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    # File handler (rotating)
    if config.LOG_FILE_ENABLED:
        fh = RotatingFileHandler(config.LOG_FILE_PATH, maxBytes=5 * 1024 * 1024, backupCount=5)
        fh.setFormatter(formatter)
        root.addHandler(fh)


# --- Fatal fault handling ---
def _terminate(exc_type, exc_value, exc_traceback, origin: str) -> None:
    logger.critical(f"{origin}: {exc_value!r}", exc_info=(exc_type, exc_value, exc_traceback))
    logging.shutdown()
    os._exit(1)


def handle_uncaught_exception(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    _terminate(exc_type, exc_value, exc_traceback, "Uncaught Exception")


def handle_thread_exception(args) -> None:
    if args.exc_type is SystemExit:
        return
    thread_name = args.thread.name if args.thread else "unknown"
    _terminate(args.exc_type, args.exc_value, args.exc_traceback, f"Unhandled exception in thread {thread_name}")


def install_fatal_handlers() -> None:
    sys.excepthook = handle_uncaught_exception
    threading.excepthook = handle_thread_exception


def log_startup_banner(app) -> None:
    logger.info(f"Environment: {app.config['ENVIRONMENT']}")
    logger.info(f"Server time: {isoformat()}")
    logger.info(f"Python version: {platform.python_version()}")
    logger.info(f"Platform: {sys.platform}")
    with app.app_context():
        logger.info(f"Firebase initialized: {get_state().firebase_initialized}")


# --- Main ---
def main() -> None:
    setup_logging()
    install_fatal_handlers()

    app = create_app()
    server = StatusServer(app, app.config["HOST"], app.config["PORT"])
    server.install_signal_handlers()
    log_startup_banner(app)

    server.serve_forever()
    logger.info("Main process finished.")


if __name__ == '__main__':
    main()
