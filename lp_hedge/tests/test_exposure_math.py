"""
Exposure Math 테스트

범위별/전체 token0 노출량 계산을 테스트합니다.
"""

import itertools
from types import SimpleNamespace

import pytest

from ..math.exposure_math import (
    get_amount0_for_range,
    exposure_for_range,
    total_exposure,
)
from ..data.types import PriceRange
from ..constants import Q96
from ..errors import DivisionByZero, InvalidRange, Overflow

ONE = Q96
TWO = 2 * Q96
HALF = Q96 // 2
ONE_AND_HALF = Q96 * 3 // 2
THREE = 3 * Q96


class TestGetAmount0ForRange:
    """get_amount0_for_range 테스트"""

    def test_full_range(self):
        """L * (2 - 1) / (2 * 1) = L / 2"""
        assert get_amount0_for_range(ONE, TWO, 1_000_000) == 500_000

    def test_rounds_up(self):
        """L * (2 - 1.5) / (2 * 1.5) = L / 6 → 올림"""
        assert get_amount0_for_range(ONE_AND_HALF, TWO, 1_000_000) == 166_667

    def test_zero_liquidity(self):
        assert get_amount0_for_range(ONE, TWO, 0) == 0

    @pytest.mark.parametrize("low,high", [(TWO, ONE), (ONE, ONE)])
    def test_invalid_range(self, low, high):
        """경계를 뒤집지 않고 거부"""
        with pytest.raises(InvalidRange):
            get_amount0_for_range(low, high, 1_000_000)

    def test_zero_lower_bound(self):
        with pytest.raises(DivisionByZero):
            get_amount0_for_range(0, ONE, 1_000_000)

    def test_denominator_overflow(self):
        """√P_low * √P_high 가 uint256 을 넘는 경우"""
        with pytest.raises(Overflow):
            get_amount0_for_range(2 ** 159, 2 ** 160 - 1, 1)


class TestExposureForRange:
    """exposure_for_range 테스트"""

    def setup_method(self):
        self.price_range = PriceRange(ONE, TWO, 1_000_000)

    def test_price_in_range(self):
        """가격이 범위 내: [1.5, 2] 구간"""
        assert exposure_for_range(self.price_range, ONE_AND_HALF) == 166_667

    def test_price_below_range(self):
        """가격이 범위 아래: 전부 token0"""
        assert exposure_for_range(self.price_range, HALF) == 500_000

    def test_price_at_lower_bound(self):
        assert exposure_for_range(self.price_range, ONE) == 500_000

    def test_price_above_range(self):
        """가격이 범위 위: 전부 token1"""
        assert exposure_for_range(self.price_range, THREE) == 0

    def test_price_at_upper_bound(self):
        assert exposure_for_range(self.price_range, TWO) == 0

    def test_below_gt_straddling_gt_above(self):
        below = exposure_for_range(self.price_range, HALF)
        straddling = exposure_for_range(self.price_range, ONE_AND_HALF)
        above = exposure_for_range(self.price_range, THREE)
        assert below > straddling > above

    def test_zero_liquidity_always_zero(self):
        empty = PriceRange(ONE, TWO, 0)
        for price in (HALF, ONE, ONE_AND_HALF, TWO, THREE):
            assert exposure_for_range(empty, price) == 0

    def test_monotonic_non_increasing_in_price(self):
        price_range = PriceRange(ONE, 4 * Q96, 10 ** 18)
        prices = [Q96 * k // 16 for k in range(8, 80)]
        exposures = [exposure_for_range(price_range, p) for p in prices]
        assert all(a >= b for a, b in zip(exposures, exposures[1:]))

    @pytest.mark.parametrize("price", [HALF, ONE_AND_HALF, THREE])
    def test_invalid_bounds_rejected_regardless_of_price(self, price):
        """생성 검증을 거치지 않은 범위도 계산 시점에 다시 검사"""
        raw = SimpleNamespace(sqrt_price_lower=TWO, sqrt_price_upper=ONE, liquidity=1_000_000)
        with pytest.raises(InvalidRange):
            exposure_for_range(raw, price)


class TestTotalExposure:
    """total_exposure 테스트"""

    def test_empty(self):
        assert total_exposure([], ONE_AND_HALF) == 0

    def test_two_ranges_rounded_independently(self):
        """166667 + 333334, 500000 이 아님"""
        ranges = [PriceRange(ONE, TWO, 1_000_000), PriceRange(ONE, TWO, 2_000_000)]
        assert total_exposure(ranges, ONE_AND_HALF) == 500_001

    def test_sum_of_per_range_values(self):
        ranges = [
            PriceRange(HALF, ONE, 7_000_000),
            PriceRange(ONE, TWO, 1_000_000),
            PriceRange(ONE_AND_HALF, THREE, 3_333_333),
            PriceRange(TWO, 4 * Q96, 10 ** 12),
        ]
        expected = sum(exposure_for_range(r, ONE_AND_HALF) for r in ranges)
        assert total_exposure(ranges, ONE_AND_HALF) == expected

    def test_permutation_invariant(self):
        ranges = [
            PriceRange(HALF, ONE, 7_000_000),
            PriceRange(ONE, TWO, 1_000_000),
            PriceRange(ONE_AND_HALF, THREE, 3_333_333),
        ]
        results = {total_exposure(list(p), ONE_AND_HALF) for p in itertools.permutations(ranges)}
        assert len(results) == 1

    def test_accepts_generator(self):
        ranges = (PriceRange(ONE, TWO, liq) for liq in (1_000_000, 2_000_000))
        assert total_exposure(ranges, ONE_AND_HALF) == 500_001

    def test_invalid_range_aborts_sum(self):
        ranges = [
            PriceRange(ONE, TWO, 1_000_000),
            SimpleNamespace(sqrt_price_lower=TWO, sqrt_price_upper=ONE, liquidity=1),
        ]
        with pytest.raises(InvalidRange):
            total_exposure(ranges, ONE_AND_HALF)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
