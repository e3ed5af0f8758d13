"""Flask application factory."""

from __future__ import annotations

from flask import Flask

from .config import BaseConfig, DevConfig
from .logging_config import get_logger, setup_logging


def create_app(config: BaseConfig | None = None) -> Flask:
    """Build the Flask app with the habits blueprint and CLI commands."""

    cfg = config or DevConfig()
    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=cfg.SECRET_KEY,
        TESTING=cfg.TESTING,
        DATABASE_URL=cfg.DATABASE_URL,
        STREAK_WINDOW_DAYS=cfg.STREAK_WINDOW_DAYS,
        HEATMAP_WEEKS=cfg.HEATMAP_WEEKS,
    )

    setup_logging(cfg)

    from . import cli, extensions
    from .blueprints.habits import bp as habits_bp

    extensions.init_app(app, cfg)
    app.register_blueprint(habits_bp)
    cli.init_app(app)

    get_logger(__name__).info("App created", extra={"database_url": cfg.DATABASE_URL})
    return app
