"""
统一异常定义模块
"""

from typing import Optional, Dict, Any


class DestressApiError(Exception):
    """服务基础异常类"""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(DestressApiError):
    """配置相关错误"""
    pass


class ErrorCodes:
    """错误代码常量"""

    CONFIG_NOT_FOUND = "CONFIG_001"
    CONFIG_INVALID_FORMAT = "CONFIG_002"
    CONFIG_LOAD_ERROR = "CONFIG_003"

    INTERNAL_ERROR = "INTERNAL_ERROR"


def create_error_response(error: DestressApiError) -> Dict[str, Any]:
    """创建标准化的错误响应"""
    return {
        "error": True,
        "error_code": error.error_code,
        "message": error.message,
        "context": error.context
    }
