import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PACKAGE_LOGGER_NAME = "configstore"


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"未知的日志级别: {level!r}")
    return resolved


def set_global_log_level(
    level: Union[str, int], logger_name: Optional[str] = None
) -> logging.Logger:
    """
    设置日志级别

    Args:
        level: 日志级别，可以是字符串('DEBUG', 'INFO'等)或logging模块的级别常量
        logger_name: 需要调整的日志器名称，默认为根日志器；
            传入 PACKAGE_LOGGER_NAME 时只影响 configstore 自身的日志

    Returns:
        被配置的日志器
    """
    numeric_level = _resolve_level(level)

    target = logging.getLogger(logger_name)
    target.setLevel(numeric_level)

    # 如果没有处理器，添加一个默认的控制台处理器
    if not target.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        target.addHandler(console_handler)

    for handler in target.handlers:
        handler.setLevel(numeric_level)

    return target
