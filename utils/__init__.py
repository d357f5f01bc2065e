"""
工具模块包
提供配置、日志和异常处理
"""

from .config_manager import config_manager, ApiConfig
from .exceptions import (
    DestressApiError,
    ConfigurationError,
    ErrorCodes,
    create_error_response
)
from .logging_manager import (
    initialize_logging,
    api_logger,
    track_logger,
    main_logger
)

# 版本信息
__version__ = "1.0.0"

__all__ = [
    # 配置管理
    "config_manager",
    "ApiConfig",

    # 异常处理
    "DestressApiError",
    "ConfigurationError",
    "ErrorCodes",
    "create_error_response",

    # 日志工具
    "initialize_logging",
    "api_logger",
    "track_logger",
    "main_logger",
]
