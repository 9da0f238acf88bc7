"""密码复杂度校验

规则是一个有序的 (predicate, message) 列表，按顺序检查，第一个不满足的规则即为结果。
增删或调整规则只需要修改 PASSWORD_RULES。
"""

import re
from typing import Callable

from ..constant import (
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_SPECIAL_CHARACTERS,
    PasswordViolation,
)

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(f"[{re.escape(PASSWORD_SPECIAL_CHARACTERS)}]")
_WHITESPACE_RE = re.compile(r"\s")


def is_complex(password: str) -> bool:
    """Return True if password mixes lower, upper, digit and special chars with no whitespace."""
    return bool(
        _LOWER_RE.search(password)
        and _UPPER_RE.search(password)
        and _DIGIT_RE.search(password)
        and _SPECIAL_RE.search(password)
        and not _WHITESPACE_RE.search(password)
    )


# predicate 返回 True 表示通过该规则
PASSWORD_RULES: list[tuple[Callable[[str], bool], PasswordViolation]] = [
    (lambda p: len(p) >= PASSWORD_MIN_LENGTH, PasswordViolation.TOO_SHORT),
    (lambda p: len(p) <= PASSWORD_MAX_LENGTH, PasswordViolation.TOO_LONG),
    (lambda p: not (p.startswith(" ") or p.endswith(" ")), PasswordViolation.EDGE_SPACE),
    (is_complex, PasswordViolation.NOT_COMPLEX),
]


def validate_password(password: str, rules=None) -> str | None:
    """校验密码

    Args:
        password: 明文密码
        rules: 可选的规则列表，默认 PASSWORD_RULES

    Returns:
        None 表示通过，否则返回第一条未通过规则的提示信息
    """
    if rules is None:
        rules = PASSWORD_RULES
    for predicate, violation in rules:
        if not predicate(password):
            return violation.value
    return None
