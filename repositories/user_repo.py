"""用户数据访问仓库

抽象出数据库访问逻辑，方便后续替换为其它存储。"""

from ..extensions import db
from ..models.user import User


def get_by_id(user_id: int) -> User | None:
	return db.session.get(User, user_id)


def get_by_user_name(user_name: str) -> User | None:
	return User.query.filter_by(user_name=user_name).first()


def has_user_with_user_name(user_name: str) -> bool:
	return get_by_user_name(user_name) is not None


def insert_user(user_name: str, password_hash: str, full_name: str, nickname: str | None = None) -> User:
	"""插入新用户

	id 与 date_created 由数据库生成。user_name 重复时 commit 会抛出
	sqlalchemy.exc.IntegrityError，由调用方处理。
	"""
	user = User(user_name=user_name,
				password=password_hash,
				full_name=full_name,
				nickname=nickname)
	db.session.add(user)
	db.session.commit()
	return user
