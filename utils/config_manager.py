"""
配置管理模块
合并 config/ 目录下的 JSON 文件，并提供类型化的配置段访问
"""

import json
import logging
from typing import Any, Optional, Dict
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigurationError, ErrorCodes
from .path_utils import CONFIG_DIR

config_logger = logging.getLogger("Config")


@dataclass
class LoggingModuleConfig:
    """模块日志配置"""
    level: str = "INFO"
    enabled: bool = True

@dataclass
class FileLoggingConfig:
    """文件日志配置"""
    enabled: bool = False
    directory: str = "log"
    filename: str = "sys.log"
    rotation: Optional[Dict[str, Any]] = None

@dataclass
class ConsoleLoggingConfig:
    """控制台日志配置"""
    enabled: bool = True

@dataclass
class LoggingConfig:
    """完整日志配置"""
    level: str = "INFO"
    format: str = "[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file_config: FileLoggingConfig = field(default_factory=FileLoggingConfig)
    console_config: ConsoleLoggingConfig = field(default_factory=ConsoleLoggingConfig)
    modules: Dict[str, LoggingModuleConfig] = field(default_factory=dict)

@dataclass
class ApiConfig:
    """API配置"""
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"


class UnifiedConfigManager:
    """配置管理器"""

    def __init__(self, config_dir: Optional[str] = None):
        self._config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self._config_data: Dict[str, Any] = {}
        self._typed_cache: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """按文件名顺序加载并浅合并所有 JSON 配置"""
        config_logger.info(f"Loading configuration from directory: {self._config_dir}")

        if not self._config_dir.exists():
            config_logger.warning(f"Configuration directory not found, using defaults: {self._config_dir}")
            return
        if not self._config_dir.is_dir():
            raise ConfigurationError(
                f"Configuration path is not a directory: {self._config_dir}",
                ErrorCodes.CONFIG_NOT_FOUND
            )

        config_files = sorted(self._config_dir.glob('*.json'))
        for config_file in config_files:
            self._config_data.update(self._read_file(config_file))
        config_logger.info(f"Configuration loaded and merged from {len(config_files)} files.")

    @staticmethod
    def _read_file(config_file: Path) -> Dict[str, Any]:
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {config_file.name}: {e}",
                ErrorCodes.CONFIG_INVALID_FORMAT
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file {config_file.name}: {e}",
                ErrorCodes.CONFIG_LOAD_ERROR
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file.name} must contain a JSON object",
                ErrorCodes.CONFIG_INVALID_FORMAT
            )
        return data

    def get_nested(self, path: str, default: Any = None) -> Any:
        """获取嵌套配置值，支持点分隔路径"""
        current = self._config_data
        for key in path.split('.'):
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    def get_logging_config(self) -> LoggingConfig:
        """获取日志配置（类型安全）"""
        if 'logging_config' not in self._typed_cache:
            try:
                self._typed_cache['logging_config'] = self._parse_logging_config(
                    self.get_nested('logging_config', {})
                )
            except (AttributeError, TypeError) as e:
                config_logger.error(f"Failed to parse logging config: {e}")
                self._typed_cache['logging_config'] = LoggingConfig()

        return self._typed_cache['logging_config']

    @staticmethod
    def _parse_logging_config(data: Dict[str, Any]) -> LoggingConfig:
        defaults = LoggingConfig()
        file_data = data.get('file_config', {})
        return LoggingConfig(
            level=data.get('level', defaults.level),
            format=data.get('format', defaults.format),
            date_format=data.get('date_format', defaults.date_format),
            file_config=FileLoggingConfig(
                enabled=file_data.get('enabled', False),
                directory=file_data.get('directory', 'log'),
                filename=file_data.get('filename', 'sys.log'),
                rotation=file_data.get('rotation')
            ),
            console_config=ConsoleLoggingConfig(
                enabled=data.get('console_config', {}).get('enabled', True)
            ),
            modules={
                name: LoggingModuleConfig(
                    level=module.get('level', 'INFO'),
                    enabled=module.get('enabled', True)
                )
                for name, module in data.get('modules', {}).items()
            }
        )

    def get_api_config(self) -> ApiConfig:
        """获取API配置（类型安全）"""
        if 'api_config' not in self._typed_cache:
            api_data = self.get_nested('api_config', {})
            try:
                api_config = ApiConfig(
                    host=api_data.get('host', '0.0.0.0'),
                    port=int(api_data.get('port', 8080)),
                    log_level=api_data.get('log_level', 'info')
                )
            except (AttributeError, TypeError, ValueError) as e:
                config_logger.error(f"Failed to parse api config: {e}")
                api_config = ApiConfig()
            self._typed_cache['api_config'] = api_config

        return self._typed_cache['api_config']


config_manager = UnifiedConfigManager()
