"""
字段格式校验
"""

import re

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# 6-20 位，至少包含一个数字、一个小写字母、一个大写字母
# 数字只认 ASCII 0-9；任何换行类字符（含 \u2028 \u2029）都不允许出现
_LINE_CHAR = r"[^\n\r\u2028\u2029]"
PASSWORD_PATTERN = re.compile(
    rf"(?={_LINE_CHAR}*[0-9])(?={_LINE_CHAR}*[a-z])(?={_LINE_CHAR}*[A-Z]){_LINE_CHAR}{{6,20}}"
)

PASSWORD_RULE_MESSAGE = (
    "Password must be between 6 to 20 characters and contain at least one "
    "numeric digit, one uppercase and one lowercase letter."
)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_strong_password(password: str) -> bool:
    return PASSWORD_PATTERN.fullmatch(password) is not None


def missing_fields(**fields: str) -> list:
    """返回值为空（None 或空串）的字段名列表"""
    return [name for name, value in fields.items() if not value]
