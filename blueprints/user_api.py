import logging

from flask import jsonify, request
from . import api_bp
from ..extensions import hasher, sanitizer
from ..services import user_tasks as user_service

logger = logging.getLogger(__name__)


'''
通信数据格式：
发送格式：
{
	"user_name":"xxxx",
	"password":"xxxx",
	"full_name":"xxxx",
	"nickname":"xxxx"        # 可选
}
返回格式：
201, Location: /api/users/<id>
{
	"id": 1,
	"user_name":"xxxx",
	"full_name":"xxxx",
	"nickname":"xxxx",
	"date_created":"2024-01-01T00:00:00Z"
}
失败：
400/500
{
	"error":"xxxx"
}
'''
@api_bp.post("/users")
def create_user():
	recived_data = request.get_json(silent=True)
	if not isinstance(recived_data, dict):
		return jsonify({"error": "invalid json"}), 400

	logger.debug("Register called for user_name=%r", recived_data.get("user_name"))
	user = user_service.Register(recived_data, hasher=hasher, sanitizer=sanitizer)

	response = jsonify(user)
	response.status_code = 201
	response.headers["Location"] = f"{request.path.rstrip('/')}/{user['id']}"
	return response


@api_bp.get("/users/<int:user_id>")
def get_user(user_id: int):
	user = user_service.Get_user(user_id, sanitizer=sanitizer)
	if user is None:
		return jsonify({"error": "User doesn't exist"}), 404
	return jsonify(user), 200
