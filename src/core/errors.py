"""
领域异常定义

所有业务操作失败时抛出 ServiceError 的子类，
API 层统一把它们转换为 {"error": <category>, "message": <text>} 响应。

分类：
- NotFound: 记录不存在 / 列表为空
- InvalidPayload: 必填字段缺失或格式不合法
- Error: 其他业务错误（邮箱格式、重复邮箱、弱密码等）
"""

from typing import Any, Optional


class ServiceError(Exception):
    """业务错误基类（category = "Error"）"""

    category = "Error"
    status_code = 400

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict:
        body = {"error": self.category, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class RecordNotFoundError(ServiceError):
    """记录不存在"""

    category = "NotFound"
    status_code = 404


class InvalidPayloadError(ServiceError):
    """请求载荷不合法"""

    category = "InvalidPayload"
    status_code = 422


class DuplicateRecordError(ServiceError):
    """唯一字段冲突（仍属于 Error 分类）"""

    status_code = 409
