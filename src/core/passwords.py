"""
密码哈希

数据库只保存 bcrypt 哈希，明文密码不落库、不出现在响应中。
"""

import bcrypt


def hash_password(plain: str) -> str:
    """哈希密码"""
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """验证密码"""
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
