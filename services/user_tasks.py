import logging
from datetime import datetime, timezone

from pydantic import BaseModel, StrictStr, ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..constant import REQUIRED_FIELDS
from ..extensions import db
from ..models.user import User
from ..repositories import user_repo
from ..utils.password_policy import validate_password

logger = logging.getLogger(__name__)

#####################################
# 错误定义

class RegistrationError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingField(RegistrationError):
    def __init__(self, field: str):
        super().__init__(f"Missing '{field}' in request body")
        self.field = field


class InvalidField(RegistrationError):
    def __init__(self, field: str):
        super().__init__(f"'{field}' must be a string")
        self.field = field


class DuplicateUsername(RegistrationError):
    def __init__(self):
        super().__init__("Username is already taken")


class InvalidPassword(RegistrationError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class StoreFailure(RegistrationError):
    status_code = 500

    def __init__(self):
        super().__init__("server error")
#####################################

#####################################
# API Definition

class NewUser(BaseModel):
    user_name: StrictStr
    password: StrictStr
    full_name: StrictStr
    nickname: StrictStr | None = None


class SerializedUser(BaseModel):
    id: int
    full_name: str
    user_name: str
    nickname: str
    date_created: datetime
#####################################


def serialize_user(user: User, sanitizer) -> dict:
    """把数据库行转换为可对外返回的 dict，不包含 password 字段"""
    date_created = user.date_created
    # 数据库中的时间按 UTC 存储，不带时区信息
    if date_created.tzinfo is None:
        date_created = date_created.replace(tzinfo=timezone.utc)
    return SerializedUser(
        id=user.id,
        full_name=sanitizer.clean(user.full_name),
        user_name=sanitizer.clean(user.user_name),
        nickname=sanitizer.clean(user.nickname),
        date_created=date_created,
    ).model_dump(mode="json")


def _parse_candidate(candidate: dict) -> NewUser:
    for field in REQUIRED_FIELDS:
        if not candidate.get(field):
            raise MissingField(field)
    try:
        return NewUser.model_validate(candidate)
    except ValidationError as e:
        raise InvalidField(str(e.errors()[0]["loc"][0])) from e


#####################################
#注册
def Register(candidate: dict, *, hasher, sanitizer) -> dict:
    """注册新用户

    Args:
        candidate: 请求体，包含 user_name / password / full_name，nickname 可选
        hasher: 提供 hash(password) 的密码哈希器
        sanitizer: 提供 clean(value) 的输出过滤器

    Returns:
        序列化后的用户 dict

    Raises:
        RegistrationError 的各个子类，按检查顺序第一个失败即抛出
    """
    new_user = _parse_candidate(candidate)

    try:
        taken = user_repo.has_user_with_user_name(new_user.user_name)
    except SQLAlchemyError as e:
        logger.exception("Username lookup failed")
        db.session.rollback()
        raise StoreFailure() from e
    if taken:
        logger.info("Registration rejected: user_name %r already taken", new_user.user_name)
        raise DuplicateUsername()

    reason = validate_password(new_user.password)
    if reason:
        logger.info("Registration rejected for %r: %s", new_user.user_name, reason)
        raise InvalidPassword(reason)

    password_hash = hasher.hash(new_user.password)

    try:
        user = user_repo.insert_user(
            user_name=new_user.user_name,
            password_hash=password_hash,
            full_name=new_user.full_name,
            nickname=new_user.nickname or None,
        )
    except IntegrityError as e:
        # 预检查与插入之间被并发注册抢先，由唯一约束兜底
        db.session.rollback()
        logger.info("Registration rejected: user_name %r hit unique constraint", new_user.user_name)
        raise DuplicateUsername() from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Inserting user %r failed", new_user.user_name)
        raise StoreFailure() from e

    logger.info("Registered user %r (id=%s)", user.user_name, user.id)
    return serialize_user(user, sanitizer)
#####################################


#####################################
# 按 id 查询
def Get_user(user_id: int, *, sanitizer) -> dict | None:
    user = user_repo.get_by_id(user_id)
    if user is None:
        return None
    return serialize_user(user, sanitizer)
#####################################
