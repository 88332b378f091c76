"""
Unit tests for runtime configuration utilities.
"""
# 说明：RuntimeConfig（运行时配置）及全局配置访问辅助函数的单元测试。
# 覆盖：
# - configure(...)：通过关键字参数更新全局配置实例字段，未知字段报错
# - RuntimeConfig.load_from_env(...)：从 LUTHIER_ 前缀环境变量加载并覆写配置选项
# - get_config()：返回全局 RuntimeConfig 单例并保持状态一致性

import pytest

from luthier.core.utils import RuntimeConfig, configure, get_config


def test_configure_updates_values() -> None:
    # 验证 configure(...) 能正确更新全局配置的字段值
    cfg = configure(strict_validation=False, discriminator_field="kind")
    assert cfg.strict_validation is False
    assert cfg.discriminator_field == "kind"


def test_configure_rejects_unknown_option() -> None:
    with pytest.raises(AttributeError):
        configure(no_such_option=1)


def test_runtime_config_env_override(monkeypatch) -> None:
    # 验证 RuntimeConfig.load_from_env(...) 按环境变量覆写默认配置
    cfg = RuntimeConfig()
    monkeypatch.setenv("LUTHIER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LUTHIER_DETECT_CYCLES", "no")
    monkeypatch.setenv("LUTHIER_STRICT_VALIDATION", "TRUE")
    monkeypatch.setenv("LUTHIER_CONFIG_DIR", "/etc/luthier")
    cfg.load_from_env()
    assert cfg.log_level == "DEBUG"
    assert cfg.detect_cycles is False
    assert cfg.strict_validation is True
    assert cfg.config_dir == "/etc/luthier"


def test_runtime_config_defaults() -> None:
    cfg = RuntimeConfig()
    assert cfg.discriminator_field == "type"
    assert cfg.detect_cycles is True
    assert cfg.config_dir is None


def test_get_config_returns_singleton() -> None:
    # 验证 get_config() 每次返回的是同一全局实例（单例行为）
    cfg = get_config()
    cfg.strict_validation = True
    assert get_config() is cfg
    assert get_config().strict_validation is True
