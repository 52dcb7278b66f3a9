"""
Full Math - 512비트 중간값을 사용하는 곱셈-나눗셈

uint256 피연산자의 a * b / denominator 를 정밀도 손실 없이 계산.
a * b 가 256비트를 넘어도 결과가 256비트에 들어가면 정확한 값을 반환하고,
들어가지 않으면 조용히 랩어라운드하지 않고 Overflow를 발생시킵니다.

References:
- Uniswap V3 Core: contracts/libraries/FullMath.sol
- Remco Bloemen, "Mathemagic: full multiply" (512-bit mulDiv)

핵심 아이디어:
    a * b = prod1 * 2^256 + prod0
    (prod1, prod0) - (a * b mod d)  → d 로 나누어 떨어짐
    d = 2^k * d_odd  → 2^k 로 먼저 나누고, d_odd 의 mod 2^256 역원을 곱함
"""

from ..constants import INT256_MAX, INT256_MIN, UINT256_MAX
from ..errors import DivisionByZero, Overflow

# Newton 반복 횟수: 4비트 시드 → 8 → 16 → 32 → 64 → 128 → 256
_NEWTON_ITERATIONS = 6


def full_mul_div(a: int, b: int, denominator: int, round_up: bool = False) -> int:
    """floor(a * b / denominator) 또는 ceil(a * b / denominator)

    Solidity FullMath.mulDiv / mulDivRoundingUp 과 동일한 결과.
    부동소수점을 전혀 사용하지 않으므로 플랫폼과 무관하게 비트 단위로 동일합니다.

    Args:
        a: 피승수 (uint256)
        b: 승수 (uint256)
        denominator: 제수 (uint256)
        round_up: True면 올림, False면 내림

    Returns:
        결과 (uint256)

    Raises:
        DivisionByZero: denominator == 0
        Overflow: 피연산자가 uint256 범위를 벗어나거나 결과가 uint256에 들어가지 않는 경우
    """
    _require_uint256(a, "a")
    _require_uint256(b, "b")
    _require_uint256(denominator, "denominator")

    if denominator == 0:
        raise DivisionByZero("mulDiv: denominator == 0")

    product = a * b
    remainder = product % denominator

    prod0 = product & UINT256_MAX
    prod1 = product >> 256

    if prod1 == 0:
        result = prod0 // denominator
    else:
        if denominator <= prod1:
            raise Overflow(
                f"mulDiv: 결과가 uint256을 초과합니다 (denominator={denominator} <= high={prod1})"
            )
        result = _div_512(prod0, prod1, remainder, denominator)

    if round_up and remainder > 0:
        if result == UINT256_MAX:
            raise Overflow("mulDivRoundingUp: 올림 결과가 uint256을 초과합니다")
        result += 1

    return result


def _div_512(prod0: int, prod1: int, remainder: int, denominator: int) -> int:
    """(prod1 * 2^256 + prod0) / denominator, 나머지가 0이 되도록 보정된 정확한 나눗셈

    호출자가 denominator > prod1 을 보장해야 합니다.
    """
    # 512비트 값에서 나머지를 빼서 정확히 나누어 떨어지게 만듦
    if remainder > prod0:
        prod1 -= 1
    prod0 = (prod0 - remainder) & UINT256_MAX

    # denominator 의 최대 2의 거듭제곱 약수
    twos = denominator & -denominator
    denominator //= twos
    prod0 //= twos

    # prod1 의 비트를 prod0 으로 이동: twos_inv = 2^256 / twos
    twos_inv = ((-twos) & UINT256_MAX) // twos + 1
    prod0 |= (prod1 * twos_inv) & UINT256_MAX

    # 홀수 denominator 의 mod 2^256 역원 (Newton-Raphson)
    # (3 * d) ^ 2 는 하위 4비트가 정확한 시드
    inverse = ((3 * denominator) ^ 2) & UINT256_MAX
    for _ in range(_NEWTON_ITERATIONS):
        inverse = (inverse * (2 - denominator * inverse)) & UINT256_MAX

    return (prod0 * inverse) & UINT256_MAX


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator)"""
    return full_mul_div(a, b, denominator, round_up=False)


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """ceil(a * b / denominator)"""
    return full_mul_div(a, b, denominator, round_up=True)


def div_rounding_up(numerator: int, denominator: int) -> int:
    """ceil(numerator / denominator)"""
    return full_mul_div(numerator, 1, denominator, round_up=True)


def checked_mul(a: int, b: int) -> int:
    """a * b, uint256을 넘으면 Overflow"""
    return full_mul_div(a, b, 1)


def checked_add(a: int, b: int) -> int:
    """a + b, uint256을 넘으면 Overflow"""
    _require_uint256(a, "a")
    _require_uint256(b, "b")
    result = a + b
    if result > UINT256_MAX:
        raise Overflow(f"덧셈 결과가 uint256을 초과합니다: {a} + {b}")
    return result


def to_int256(value: int) -> int:
    """부호 있는 값이 int256 범위에 들어가는지 검사"""
    if value < INT256_MIN or value > INT256_MAX:
        raise Overflow(f"int256 범위를 벗어났습니다: {value}")
    return value


def _require_uint256(value: int, name: str) -> None:
    if value < 0 or value > UINT256_MAX:
        raise Overflow(f"{name}이(가) uint256 범위를 벗어났습니다: {value}")
