# thingful_users/__init__.py
import logging

from flask import Flask
from .extensions import db, migrate, hasher, sanitizer
from .config import get_config
from .blueprints import register_blueprints


def create_app(config: str | None = None):
    app = Flask(__name__)
    app.config.from_object(get_config(config))

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    db.init_app(app)
    migrate.init_app(app, db)
    hasher.init_app(app)
    sanitizer.init_app(app)

    # 确保模型注册到 metadata 上，供 create_all / flask db 使用
    from .models import user  # noqa: F401

    register_blueprints(app)
    return app
