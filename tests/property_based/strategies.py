"""
Hypothesis strategies shared by the property-based tests.
"""
# 说明：属性测试中共享的 Hypothesis 策略集。
# 职责：
# - 生成半开区间与区间列表（含空区间与重叠区间）
# - 生成合法的实体名称与实体名称列表

from hypothesis import strategies as st


# ------------------------------------------------------------------ Intervals
@st.composite
def intervals(draw, low=-1000, high=1000):
    # 以整数端点生成区间，允许 start == end 的空区间，便于精确比较
    start = draw(st.integers(min_value=low, max_value=high))
    length = draw(st.integers(min_value=0, max_value=200))
    return (float(start), float(start + length))


@st.composite
def interval_lists(draw, max_size=12):
    return draw(st.lists(intervals(), min_size=0, max_size=max_size))


# ------------------------------------------------------------------ Names
@st.composite
def entity_names(draw):
    # 非空标识符形式的实体名
    return draw(st.from_regex(r"[a-z][a-zA-Z0-9_]{0,15}", fullmatch=True))


@st.composite
def name_lists(draw, min_size=1, max_size=10):
    return draw(st.lists(entity_names(), min_size=min_size, max_size=max_size))
