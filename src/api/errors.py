"""
异常处理器

把领域异常和请求校验错误统一转换为：
    {"error": "<NotFound|InvalidPayload|Error>", "message": "...", "details": ...}
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import ServiceError, InvalidPayloadError
from utils.logger import get_logger

logger = get_logger("Timetable")


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """领域异常 → 对应分类的 JSON 响应"""
    logger.info(
        f"{request.method} {request.url.path} -> {exc.status_code} "
        f"{exc.category}: {exc.message}"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体 / 参数校验失败 → InvalidPayload"""
    error = InvalidPayloadError(
        "Request payload failed validation.",
        details=jsonable_encoder(exc.errors()),
    )
    logger.info(f"{request.method} {request.url.path} -> 422 InvalidPayload")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """未处理异常：记录堆栈，返回通用错误"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Error", "message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
