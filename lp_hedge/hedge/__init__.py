"""
Hedge layer for LP Delta Hedge

노출량 → 파생상품 목표 포지션 계산:
- schemas: HedgeRequest / HedgeResult / NoAction
- sizer: 참여 비율, 소수점 변환, 목표 크기, 슬리피지 한도 가격, 요청 식별자
"""

from .schemas import Participation, HedgeRequest, HedgeResult, NoAction
from .sizer import (
    compute_hedge,
    resolve_participation_bps,
    scale_to_size_decimals,
    compute_target_size,
    slippage_limit_price,
    derive_request_id,
)
