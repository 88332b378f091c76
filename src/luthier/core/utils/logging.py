"""
Lightweight logging helpers with config-aware defaults.
"""
# 说明：轻量级日志工具，提供统一的 logger 获取入口，并避免原始配置节点内容泄露到日志中。
# 职责：
# - ConfigNodeFilter：根据运行时配置对日志记录中的配置节点/凭据等字段进行脱敏处理
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载过滤器
# - get_logger(...)：按名称获取 logger 并挂载过滤器，必要时自动完成日志系统初始化
# 约定：
# - 是否掩码敏感字段由 RuntimeConfig.mask_sensitive_fields 控制
# - 日志级别优先级：显式参数 level > 环境变量 LUTHIER_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config


class ConfigNodeFilter(logging.Filter):
    """Filter that hides raw configuration payloads from log records if configured."""
    # 日志过滤器：在启用掩码配置时，对约定字段名（config / payload / credentials）统一脱敏

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.mask_sensitive_fields:
            return True
        for attr in ("config", "payload", "credentials"):
            if hasattr(record, attr):
                setattr(record, attr, "***")
        return True


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 ConfigNodeFilter
    log_level = level or os.environ.get("LUTHIER_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, ConfigNodeFilter) for f in root.filters):
        root.addFilter(ConfigNodeFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    # 根 logger 的过滤器不作用于子 logger 传播上来的记录，因此每个 logger 各自挂载一份
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    if not any(isinstance(f, ConfigNodeFilter) for f in logger.filters):
        logger.addFilter(ConfigNodeFilter())
    return logger
