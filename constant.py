from enum import Enum


# 注册时必须提供的字段，按此顺序检查
REQUIRED_FIELDS = ("user_name", "password", "full_name")

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 72
PASSWORD_SPECIAL_CHARACTERS = "!@#$%^&"


class PasswordViolation(Enum):
    TOO_SHORT = "Password must be longer than 8 characters"
    TOO_LONG = "Password must be shorter than 72 characters"
    EDGE_SPACE = "Password must not start or end with a space"
    NOT_COMPLEX = "Password must contain at least 1 uppercase, 1 lowercase, 1 number, and 1 special character"
