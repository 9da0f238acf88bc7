import logging

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError
from ..extensions import db
from ..services.user_tasks import RegistrationError

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__, url_prefix="/api")


@api_bp.errorhandler(RegistrationError)
def handle_registration_error(e: RegistrationError):
	return jsonify({"error": e.message}), e.status_code


@api_bp.errorhandler(SQLAlchemyError)
def handle_store_error(e: SQLAlchemyError):
	db.session.rollback()
	logger.exception("Unhandled database error")
	return jsonify({"error": "server error"}), 500


# 路由模块依赖 api_bp，必须在其定义之后导入
from . import user_api  # noqa: E402,F401


def register_blueprints(app):
	app.register_blueprint(api_bp)
