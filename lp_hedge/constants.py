"""
LP Delta Hedge 상수 정의

정수 연산 폭과 고정소수점 인코딩 상수들:
- Q96: sqrt price 인코딩에 사용 (2^96)
- UINT*_MAX: 각 정수 폭의 최대값 (오버플로우 검사)
- BPS_DENOMINATOR: 참여 비율/슬리피지의 기준 (10000 = 100%)
"""

from typing import Final

# Fixed-point 인코딩 상수
RESOLUTION: Final[int] = 96
Q96: Final[int] = 2 ** RESOLUTION
Q192: Final[int] = 2 ** 192

# 정수 폭
UINT256_MAX: Final[int] = 2 ** 256 - 1
UINT160_MAX: Final[int] = 2 ** 160 - 1
UINT128_MAX: Final[int] = 2 ** 128 - 1
INT256_MAX: Final[int] = 2 ** 255 - 1
INT256_MIN: Final[int] = -(2 ** 255)

# 틱 범위 상수
MIN_TICK: Final[int] = -887272
MAX_TICK: Final[int] = 887272

# basis points (parts-per-ten-thousand)
BPS_DENOMINATOR: Final[int] = 10_000

# 10**77 < 2**256 < 10**78
MAX_DECIMALS: Final[int] = 77
