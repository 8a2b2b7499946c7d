"""
日志系统
- 分级日志记录
- 控制台（彩色）和文件输出
- 日志轮转，错误日志单独成文件
- 调试模式切换（DEBUG 环境变量或 set_global_debug）
"""

import os
import sys
import copy
import logging
from pathlib import Path
from typing import Optional, Dict
from logging.handlers import RotatingFileHandler


DEFAULT_LOGGER_NAME = "Timetable"
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(funcName)s:%(lineno)d - %(message)s'


class ColoredFormatter(logging.Formatter):
    """彩色控制台输出"""

    COLORS = {
        'DEBUG': '\033[36m',      # 青色
        'INFO': '\033[32m',       # 绿色
        'WARNING': '\033[33m',    # 黄色
        'ERROR': '\033[31m',      # 红色
        'CRITICAL': '\033[35m',   # 紫色
        'RESET': '\033[0m',
    }

    def __init__(self, *args, for_console: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self._for_console = for_console

    def format(self, record):
        if self._for_console and sys.stdout.isatty():
            # 复制 record，避免影响其他 handler
            colored_record = copy.copy(record)
            levelname = colored_record.levelname
            if levelname in self.COLORS:
                color = self.COLORS[levelname]
                reset = self.COLORS['RESET']
                colored_record.levelname = f"{color}{levelname}{reset}"
                colored_record.msg = f"{color}{colored_record.msg}{reset}"
            return super().format(colored_record)
        return super().format(record)


class Logger:
    """简单的日志记录器"""

    def __init__(
        self,
        name: str = DEFAULT_LOGGER_NAME,
        log_dir: Optional[str] = None,
        debug: bool = False,
        console: bool = True,
        file: bool = True,
    ):
        """
        初始化日志记录器

        Args:
            name: 日志记录器名称
            log_dir: 日志文件目录，默认取 LOG_DIR 环境变量或 logs/
            debug: 是否开启调试模式
            console: 是否输出到控制台
            file: 是否输出到文件
        """
        self.name = name
        self.debug_mode = debug

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)
        self.logger.handlers.clear()
        self.logger.propagate = False

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(ColoredFormatter(
                '%(asctime)s [%(levelname)s] %(filename)s:%(funcName)s:%(lineno)d - %(message)s',
                datefmt='%H:%M:%S',
                for_console=True,
            ))
            self.logger.addHandler(console_handler)

        if file:
            self.log_dir = Path(log_dir or os.getenv('LOG_DIR', 'logs'))
            self.log_dir.mkdir(parents=True, exist_ok=True)

            self._add_file_handler(f"{name.lower()}.log", max_mb=10, backups=5)
            self._add_file_handler(f"{name.lower()}_error.log", max_mb=5, backups=3, level=logging.ERROR)

    def _add_file_handler(self, filename: str, max_mb: int, backups: int, level: int = logging.NOTSET):
        handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=max_mb * 1024 * 1024,
            backupCount=backups,
            encoding='utf-8',
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
        self.logger.addHandler(handler)

    def set_debug(self, enabled: bool):
        """切换调试模式"""
        self.debug_mode = enabled
        self.logger.setLevel(logging.DEBUG if enabled else logging.INFO)

    def _log(self, level: int, msg: str, *args, **kwargs):
        # stacklevel=3：跳过 _log 和级别方法，filename/lineno 指向调用方
        kwargs.setdefault('stacklevel', 3)
        self.logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        """ERROR 级别并附带当前异常堆栈"""
        kwargs.setdefault('exc_info', True)
        self._log(logging.ERROR, msg, *args, **kwargs)


_logger_cache: Dict[str, Logger] = {}
_global_debug = False


def _env_debug() -> bool:
    return os.getenv('DEBUG', 'false').lower() == 'true'


def _env_file_logging() -> bool:
    return os.getenv('LOG_TO_FILE', 'true').lower() != 'false'


def get_logger(name: Optional[str] = None, **kwargs) -> Logger:
    """
    获取日志记录器（带缓存）

    Args:
        name: 日志记录器名称，None 则使用默认名称
        **kwargs: Logger 构造函数参数

    Returns:
        Logger 实例
    """
    name = name or DEFAULT_LOGGER_NAME

    if name not in _logger_cache:
        kwargs.setdefault('debug', _global_debug or _env_debug())
        kwargs.setdefault('file', _env_file_logging())
        _logger_cache[name] = Logger(name=name, **kwargs)

    return _logger_cache[name]


def set_global_debug(enabled: bool):
    """
    设置全局 debug 模式，并同步到所有已创建的 logger
    """
    global _global_debug
    _global_debug = enabled

    for logger in _logger_cache.values():
        logger.set_debug(enabled)

    get_logger().info(f"Global debug mode: {'ENABLED' if enabled else 'DISABLED'}")
