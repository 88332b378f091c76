"""
Hypothesis configuration for the property-based tests.
"""
# 说明：属性测试的 Hypothesis 配置。策略定义见同目录 strategies.py。
# 约定：
# - 关闭截止时间检查，避免 numpy 首次导入等冷启动开销导致偶发失败
# - 根目录 conftest 中的自动配置恢复夹具为函数级，对无状态的属性用例无影响，故抑制对应健康检查

from hypothesis import HealthCheck, settings

settings.register_profile(
    "luthier",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("luthier")
