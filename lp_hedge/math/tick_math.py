"""
Tick Math - Tick → sqrtPriceX96 변환

외부에서 틱 인덱스로 주어지는 포지션 범위를 Q64.96 sqrt price로 변환.
온체인 컨트랙트와 동일한 정밀도를 위해 정수 연산만 사용.

References:
- Uniswap V3 Core: contracts/libraries/TickMath.sol

핵심 공식:
    price = 1.0001^tick
    sqrtPriceX96 = sqrt(price) * 2^96
"""

import math

from ..constants import MAX_TICK, MIN_TICK, Q96, UINT256_MAX

MIN_SQRT_RATIO: int = 4295128739
MAX_SQRT_RATIO: int = 1461446703485210103287273052203988822378723970342

# 1 / sqrt(1.0001)^(2^i) 의 Q128.128 값, i = 1..19
_RATIO_FACTORS = (
    0xfff97272373d413259a46990580e213a,
    0xfff2e50f5f656932ef12357cf3c7fdcc,
    0xffe5caca7e10e4e61c3624eaa0941cd0,
    0xffcb9843d60f6159c9db58835c926644,
    0xff973b41fa98c081472e6896dfb254c0,
    0xff2ea16466c96a3843ec78b326b52861,
    0xfe5dee046a99a2a811c461f1969c3053,
    0xfcbe86c7900a88aedcffc83b479aa3a4,
    0xf987a7253ac413176f2b074cf7815e54,
    0xf3392b0822b70005940c7a398e4b70f3,
    0xe7159475a2c29b7443b29c7fa6e889d9,
    0xd097f3bdfd2022b8845ad8f792aa5825,
    0xa9f746462d870fdf8a65dc1f90e061e5,
    0x70d869a156d2a1b890bb3df62baf32f7,
    0x31be135f97d08fd981231505542fcfa6,
    0x9aa508b5b7a84e1c677de54f3e99bc9,
    0x5d6af8dedb81196699c329225ee604,
    0x2216e584f5fa1ea926041bedfe98,
    0x48a170391f7dc42444e8fa2,
)


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """틱에서 sqrtPriceX96 계산

    Solidity TickMath.getSqrtRatioAtTick()과 동일한 결과.

    Args:
        tick: 틱 인덱스 (-887272 ~ 887272)

    Returns:
        sqrtPriceX96 (Q64.96 형식)

    Raises:
        ValueError: 틱이 유효 범위를 벗어난 경우
    """
    if tick < MIN_TICK or tick > MAX_TICK:
        raise ValueError(f"틱이 유효 범위를 벗어났습니다: {tick} (범위: {MIN_TICK} ~ {MAX_TICK})")

    abs_tick = abs(tick)

    ratio = 0xfffcb933bd6fad37aa2d162d1a594001 if abs_tick & 0x1 else 1 << 128
    for bit, factor in enumerate(_RATIO_FACTORS, start=1):
        if abs_tick & (1 << bit):
            ratio = (ratio * factor) >> 128

    if tick > 0:
        ratio = UINT256_MAX // ratio

    # Q128.128 -> Q64.96, 올림
    return (ratio >> 32) + (1 if ratio & 0xFFFFFFFF else 0)


def sqrt_price_x96_from_price(
    price: float,
    decimal0: int = 18,
    decimal1: int = 18
) -> int:
    """Human-readable 가격을 sqrtPriceX96으로 변환

    sqrtPriceX96 = sqrt(price * 10^(decimal1 - decimal0)) * 2^96

    경계에서 float 가격을 받는 호출자용. 코어 계산은 이 값을 정수로만 다룹니다.

    Args:
        price: 가격 (token1/token0 기준)
        decimal0: token0 소수점 자릿수
        decimal1: token1 소수점 자릿수

    Returns:
        sqrtPriceX96 값
    """
    if price <= 0:
        raise ValueError("가격은 양수여야 합니다")

    adjusted_price = price * (10 ** (decimal1 - decimal0))
    return int(math.sqrt(adjusted_price) * Q96)
