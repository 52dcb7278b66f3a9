"""
LP Delta Hedge

집중화된 유동성 포지션의 token0 노출량을 계산하고,
이를 상쇄하는 파생상품 포지션의 목표 크기로 변환하는 라이브러리.
"""

__version__ = "0.1.0"

from .constants import Q96, BPS_DENOMINATOR, UINT256_MAX
from .errors import HedgeMathError, DivisionByZero, Overflow, InvalidRange
# math 를 data 보다 먼저 import (exposure_math → data.types → math.tick_math)
from .math import full_mul_div, exposure_for_range, total_exposure
from .data import PriceRange
from .hedge import Participation, HedgeRequest, HedgeResult, NoAction, compute_hedge
