"""
PriceRange 테스트

범위 생성 시 검증과 외부 레코드 변환을 테스트합니다.
"""

import dataclasses

import pytest

from ..data.types import PriceRange
from ..math.tick_math import get_sqrt_ratio_at_tick
from ..constants import Q96, UINT128_MAX, UINT160_MAX
from ..errors import InvalidRange, Overflow


class TestPriceRangeValidation:
    """PriceRange 생성 검증"""

    def test_valid(self):
        price_range = PriceRange(Q96, 2 * Q96, 1_000_000)
        assert price_range.sqrt_price_lower == Q96
        assert price_range.sqrt_price_upper == 2 * Q96
        assert price_range.liquidity == 1_000_000

    def test_reversed_bounds_rejected(self):
        """경계를 자동으로 뒤집지 않음"""
        with pytest.raises(InvalidRange) as exc_info:
            PriceRange(2 * Q96, Q96, 1_000_000)
        assert exc_info.value.sqrt_price_lower == 2 * Q96
        assert exc_info.value.sqrt_price_upper == Q96

    def test_equal_bounds_rejected(self):
        with pytest.raises(InvalidRange):
            PriceRange(Q96, Q96, 1)

    @pytest.mark.parametrize("lower,upper,liquidity", [
        (-1, Q96, 1),
        (Q96, UINT160_MAX + 1, 1),
        (Q96, 2 * Q96, UINT128_MAX + 1),
        (Q96, 2 * Q96, -1),
    ])
    def test_width_violations(self, lower, upper, liquidity):
        with pytest.raises(Overflow):
            PriceRange(lower, upper, liquidity)

    def test_immutable(self):
        price_range = PriceRange(Q96, 2 * Q96, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            price_range.liquidity = 2

    def test_value_equality(self):
        assert PriceRange(Q96, 2 * Q96, 5) == PriceRange(Q96, 2 * Q96, 5)
        assert PriceRange(Q96, 2 * Q96, 5) != PriceRange(Q96, 2 * Q96, 6)


class TestPriceRangeConstructors:
    """from_ticks / from_dict"""

    def test_from_ticks(self):
        price_range = PriceRange.from_ticks(0, 6932, 10 ** 18)
        assert price_range.sqrt_price_lower == Q96
        assert price_range.sqrt_price_upper == get_sqrt_ratio_at_tick(6932)

    def test_from_ticks_reversed(self):
        with pytest.raises(InvalidRange):
            PriceRange.from_ticks(100, -100, 1)

    def test_from_dict_ticks(self):
        """subgraph 포지션 레코드 (문자열 숫자)"""
        data = {"tickLower": "-600", "tickUpper": "600", "liquidity": "123456789"}
        price_range = PriceRange.from_dict(data)
        assert price_range == PriceRange.from_ticks(-600, 600, 123456789)

    def test_from_dict_sqrt_prices(self):
        data = {
            "sqrtPriceLowerX96": str(Q96),
            "sqrtPriceUpperX96": str(2 * Q96),
            "liquidity": "1000000",
        }
        assert PriceRange.from_dict(data) == PriceRange(Q96, 2 * Q96, 1_000_000)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
