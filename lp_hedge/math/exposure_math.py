"""
Exposure Math - 포지션의 base 자산(token0) 노출량 계산

집중화된 유동성 포지션이 현재 가격에서 보유한 token0 양을 범위별로 계산하고 합산.

References:
- Uniswap V3 Core: contracts/libraries/SqrtPriceMath.sol (getAmount0Delta)
- Uniswap V3 Periphery: contracts/libraries/LiquidityAmounts.sol

핵심 공식:
    Δx = L * (√P_b - √P_a) / (√P_a * √P_b)

    현재 가격 √P 에 따른 분류:
        √P <= √P_a       → 전부 token0:  Δx(√P_a, √P_b)
        √P >= √P_b       → 전부 token1:  0
        √P_a < √P < √P_b → 일부 token0:  Δx(√P, √P_b)

항상 올림합니다. 노출량을 과소 보고하지 않으므로 반올림 때문에 헤지가 부족해지지 않습니다.
"""

from typing import Iterable

from ..constants import RESOLUTION
from ..data.types import PriceRange
from ..errors import InvalidRange
from .full_math import checked_add, checked_mul, full_mul_div


def get_amount0_for_range(
    sqrt_price_low_x96: int,
    sqrt_price_high_x96: int,
    liquidity: int
) -> int:
    """[√P_low, √P_high] 구간에서 유동성 L 이 보유하는 token0 양 (올림)

    ceil((L << 96) * (√P_high - √P_low) / (√P_high * √P_low))

    Args:
        sqrt_price_low_x96: 하한 sqrtPriceX96
        sqrt_price_high_x96: 상한 sqrtPriceX96
        liquidity: 유동성

    Returns:
        amount0 (token0 수량, 최소 단위)

    Raises:
        InvalidRange: sqrt_price_low_x96 >= sqrt_price_high_x96
        DivisionByZero: sqrt_price_low_x96 == 0
        Overflow: 중간값 또는 결과가 uint256을 초과
    """
    # 순서를 바꾸지 않음: 잘못된 범위는 거부
    if sqrt_price_low_x96 >= sqrt_price_high_x96:
        raise InvalidRange(sqrt_price_low_x96, sqrt_price_high_x96)

    numerator1 = checked_mul(liquidity, 1 << RESOLUTION)
    numerator2 = sqrt_price_high_x96 - sqrt_price_low_x96
    denominator = checked_mul(sqrt_price_high_x96, sqrt_price_low_x96)

    return full_mul_div(numerator1, numerator2, denominator, round_up=True)


def exposure_for_range(price_range: PriceRange, sqrt_price_x96: int) -> int:
    """현재 가격에서 한 범위가 보유한 token0 양

    Args:
        price_range: 가격 범위와 유동성
        sqrt_price_x96: 현재 sqrtPriceX96

    Returns:
        token0 노출량 (최소 단위)
    """
    lower = price_range.sqrt_price_lower
    upper = price_range.sqrt_price_upper

    if sqrt_price_x96 <= lower:
        # 가격이 범위 아래: token0만 보유
        return get_amount0_for_range(lower, upper, price_range.liquidity)

    elif sqrt_price_x96 < upper:
        # 가격이 범위 내: [√P, √P_upper] 구간의 token0
        return get_amount0_for_range(sqrt_price_x96, upper, price_range.liquidity)

    else:
        # 가격이 범위 위: token1만 보유
        if lower >= upper:
            raise InvalidRange(lower, upper)
        return 0


def total_exposure(ranges: Iterable[PriceRange], sqrt_price_x96: int) -> int:
    """모든 범위의 token0 노출량 합계

    범위별로 따로 올림한 값을 더하므로 범위 수에 비례해 최대 1 단위씩 과대 보고됩니다.
    """
    total = 0
    for price_range in ranges:
        total = checked_add(total, exposure_for_range(price_range, sqrt_price_x96))
    return total
