from datetime import datetime, timezone

from ..extensions import db


def _utcnow() -> datetime:
	# 数据库列不带时区，统一按 UTC 存储，序列化时再补上时区
	return datetime.now(timezone.utc).replace(tzinfo=None)


class User(db.Model):
	__tablename__ = "thingful_users"

	id = db.Column(db.Integer, primary_key=True)
	user_name = db.Column(db.String(80), unique=True, nullable=False, index=True)
	full_name = db.Column(db.String(120), nullable=False)
	# 未提供昵称时存 NULL，序列化输出时再转成空字符串
	nickname = db.Column(db.String(120), nullable=True)
	password = db.Column(db.String(255), nullable=False)
	date_created = db.Column(db.DateTime, nullable=False, default=_utcnow, server_default=db.func.now())

	def __repr__(self) -> str:  # pragma: no cover 简单repr无需测试
		return f"<User {self.user_name}>"
