"""
日志管理模块
根据 logging_config 配置根日志器的处理器和各模块日志级别
"""

import logging
import os
import sys
import threading
from pathlib import Path
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import Optional, Dict
from dataclasses import dataclass

from .exceptions import DestressApiError, ErrorCodes
from .config_manager import config_manager, LoggingModuleConfig
from .path_utils import BASE_DIR, LOG_DIR


@dataclass
class LogConfig:
    """日志配置"""
    level: str = "INFO"
    format: str = "[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file_max_bytes: int = 10 * 1024 * 1024  # 10MB
    file_backup_count: int = 5
    enable_console: bool = True
    enable_file: bool = False
    log_directory: Optional[str] = None
    log_filename: str = "sys.log"
    rotation_type: str = "size"  # "size" or "time"


class LoggingManager:
    """日志管理器（单例）"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return
        self._initialized = True
        self._loggers: Dict[str, logging.Logger] = {}
        self._config = LogConfig()

    def configure(self, config: Optional[LogConfig] = None):
        """替换根日志器的处理器"""
        if config:
            self._config = config

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, self._config.level.upper(), logging.INFO))

        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)

        formatter = logging.Formatter(self._config.format, datefmt=self._config.date_format)
        handlers = []
        if self._config.enable_console:
            handlers.append(logging.StreamHandler(sys.stdout))
        if self._config.enable_file:
            handlers.append(self._build_file_handler())

        for handler in handlers:
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)

    def _build_file_handler(self) -> logging.Handler:
        log_directory = Path(self._config.log_directory or LOG_DIR)
        log_directory.mkdir(parents=True, exist_ok=True)
        log_file_path = log_directory / self._config.log_filename

        if self._config.rotation_type == "time":
            return TimedRotatingFileHandler(
                filename=log_file_path,
                when="midnight",
                interval=1,
                backupCount=self._config.file_backup_count,
                encoding="utf-8"
            )
        return RotatingFileHandler(
            filename=log_file_path,
            maxBytes=self._config.file_max_bytes,
            backupCount=self._config.file_backup_count,
            encoding="utf-8"
        )

    def configure_from_config_file(self):
        """从 logging_config 配置段加载日志配置"""
        try:
            logging_config = config_manager.get_logging_config()
            file_config = logging_config.file_config
            rotation = file_config.rotation or {}

            # 相对路径相对于项目根目录
            log_directory = file_config.directory
            if not os.path.isabs(log_directory):
                log_directory = str(BASE_DIR / log_directory)

            self.configure(LogConfig(
                level=logging_config.level,
                format=logging_config.format,
                date_format=logging_config.date_format,
                file_max_bytes=rotation.get('max_bytes_mb', 10) * 1024 * 1024,
                file_backup_count=rotation.get('backup_count', 5),
                enable_console=logging_config.console_config.enabled,
                enable_file=file_config.enabled,
                log_directory=log_directory,
                log_filename=file_config.filename,
                rotation_type=rotation.get('type', 'size')
            ))
            self._configure_module_loggers(logging_config.modules)
            return logging_config

        except Exception as e:
            raise DestressApiError(
                f"Failed to configure logging from config file: {str(e)}",
                ErrorCodes.CONFIG_INVALID_FORMAT
            ) from e

    def _configure_module_loggers(self, modules_config: Dict[str, LoggingModuleConfig]):
        for module_name, module_config in modules_config.items():
            level = module_config.level.upper() if module_config.enabled else "CRITICAL"
            self.get_logger(module_name).setLevel(getattr(logging, level, logging.INFO))

    def get_logger(self, name: str) -> logging.Logger:
        """获取日志记录器"""
        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(name)
        return self._loggers[name]


logging_manager = LoggingManager()

# 模块日志器
api_logger = logging_manager.get_logger("API")
track_logger = logging_manager.get_logger("Track")
main_logger = logging_manager.get_logger("Main")


def initialize_logging(use_config_file: bool = True):
    """初始化日志系统，配置文件无效时回退到默认配置"""
    if use_config_file:
        try:
            logging_config = logging_manager.configure_from_config_file()
            main_logger.info(
                f"Logging system initialized from config file "
                f"(level={logging_config.level}, file={logging_config.file_config.enabled})"
            )
            return True
        except DestressApiError as e:
            print(f"Failed to initialize logging from config file: {e}")
            print("Falling back to default configuration...")

    try:
        logging_manager.configure(LogConfig())
    except OSError as e:
        raise DestressApiError(
            f"Failed to initialize logging: {str(e)}",
            ErrorCodes.CONFIG_INVALID_FORMAT
        ) from e

    main_logger.info("Logging system initialized with default config")
    return True
