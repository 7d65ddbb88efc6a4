# src/levantflow/factory.py

import json
import logging

import click
from flask import Flask

from .config import Config
from .errors import register_error_handlers
from .firebase import init_firebase
from .middleware import install_middleware
from .routes import build_health_info, status_bp
from .state import ServiceState, attach_state, get_state

logger = logging.getLogger(__name__)


def create_app(config_class=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False
    logger.info("Creating Flask application instance.")

    try:
        install_middleware(app)
        logger.info("Middleware installed.")

        state = ServiceState(firebase_app=init_firebase(app))
        attach_state(app, state)

        app.register_blueprint(status_bp)
        register_error_handlers(app)
        logger.info("Routes and error handlers registered.")

        register_cli_commands(app)
    except Exception as e:
        logger.exception(f"🚨 CRITICAL ERROR DURING APP CREATION: {e}")
        raise

    logger.info("🚀 Application factory setup complete.")
    return app


def register_cli_commands(app: Flask) -> None:
    @app.cli.command("healthcheck")
    @click.option("--json", "as_json", is_flag=True, help="Print the full health document as JSON.")
    def healthcheck_command(as_json: bool) -> None:
        info = build_health_info(get_state())
        if as_json:
            click.echo(json.dumps(info.to_dict(), indent=2))
            return

        memory = info.process.memory
        click.secho(f"✅ Status: {info.status}", fg="green")
        click.echo(f"  - Uptime:   {info.uptime_seconds:.2f}s")
        click.echo(f"  - Memory:   {memory.used_mb} MB used / {memory.total_mb} MB total")
        click.echo(f"  - Load:     {', '.join(f'{v:.2f}' for v in info.system.load_average)}")
        click.echo(f"  - CPUs:     {info.system.cpu_count}")
        click.echo(f"  - Firebase: {'✅ Initialized' if info.firebase.initialized else '⚠️ Not initialized'}")
