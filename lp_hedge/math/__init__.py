"""
Math layer for LP Delta Hedge

온체인 수준 정밀도의 수학 함수들:
- full_math: 512비트 중간값 곱셈-나눗셈
- tick_math: Tick → sqrtPriceX96 변환
- exposure_math: 범위별/전체 token0 노출량
"""

from .full_math import (
    full_mul_div,
    mul_div,
    mul_div_rounding_up,
    div_rounding_up,
    checked_add,
    checked_mul,
    to_int256,
)
from .tick_math import (
    get_sqrt_ratio_at_tick,
    sqrt_price_x96_from_price,
)
from .exposure_math import (
    get_amount0_for_range,
    exposure_for_range,
    total_exposure,
)
