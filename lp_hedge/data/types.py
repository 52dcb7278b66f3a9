"""
포지션 데이터 타입 정의

외부에서 주어지는 범위 데이터를 Python dataclass로 정의.
모든 숫자 필드는 온체인 정밀도를 위해 int 타입 사용.
"""

from dataclasses import dataclass

from ..constants import UINT128_MAX, UINT160_MAX
from ..errors import InvalidRange, Overflow
from ..math.tick_math import get_sqrt_ratio_at_tick


@dataclass(frozen=True)
class PriceRange:
    """집중화된 유동성 포지션의 한 구간

    - sqrt_price_lower: 하한 √가격 (Q64.96, uint160)
    - sqrt_price_upper: 상한 √가격 (Q64.96, uint160)
    - liquidity: 구간 유동성 (uint128)

    sqrt_price_lower < sqrt_price_upper 가 아니면 InvalidRange.
    경계를 자동으로 뒤집지 않습니다.
    """
    sqrt_price_lower: int
    sqrt_price_upper: int
    liquidity: int

    def __post_init__(self):
        _require_width(self.sqrt_price_lower, UINT160_MAX, "sqrt_price_lower")
        _require_width(self.sqrt_price_upper, UINT160_MAX, "sqrt_price_upper")
        _require_width(self.liquidity, UINT128_MAX, "liquidity")
        if self.sqrt_price_lower >= self.sqrt_price_upper:
            raise InvalidRange(self.sqrt_price_lower, self.sqrt_price_upper)

    @classmethod
    def from_ticks(cls, tick_lower: int, tick_upper: int, liquidity: int) -> "PriceRange":
        return cls(
            sqrt_price_lower=get_sqrt_ratio_at_tick(tick_lower),
            sqrt_price_upper=get_sqrt_ratio_at_tick(tick_upper),
            liquidity=liquidity,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "PriceRange":
        """subgraph 스타일 포지션 레코드에서 생성

        sqrtPriceLowerX96/sqrtPriceUpperX96 가 있으면 그대로 사용하고,
        없으면 tickLower/tickUpper 를 변환합니다.
        """
        liquidity = int(data["liquidity"])
        if "sqrtPriceLowerX96" in data:
            return cls(
                sqrt_price_lower=int(data["sqrtPriceLowerX96"]),
                sqrt_price_upper=int(data["sqrtPriceUpperX96"]),
                liquidity=liquidity,
            )
        return cls.from_ticks(int(data["tickLower"]), int(data["tickUpper"]), liquidity)


def _require_width(value: int, max_value: int, name: str) -> None:
    if value < 0 or value > max_value:
        raise Overflow(f"{name} 값이 허용 범위를 벗어났습니다: {value}")
