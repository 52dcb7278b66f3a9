"""
Hedge Sizer - 노출량 → 파생상품 목표 포지션

포지션의 token0 노출량을 반대 방향 파생상품 포지션의 목표 크기로 변환하고,
현재 포지션과의 차이, 슬리피지 한도 가격, 주문 식별자를 계산합니다.

단계:
    1. 참여 비율 (bps) 결정, 0이면 NoAction
    2. token0 소수점 → 상품 size 소수점 변환
    3. target = -(scaled * bps // 10000)
    4. delta = target - current
    5. 방향/크기
    6. 슬리피지 한도 가격
    7. 결정적 요청 식별자

순수 함수입니다. 내부 상태나 카운터가 없으며, sequence 는 호출자가 제공합니다.
"""

import hashlib
from typing import Union

from loguru import logger

from ..constants import BPS_DENOMINATOR, UINT128_MAX
from ..math.exposure_math import total_exposure
from ..math.full_math import checked_mul, full_mul_div, to_int256
from .schemas import HedgeRequest, HedgeResult, NoAction


def resolve_participation_bps(enabled_count: int, total_count: int, override_bps: int = 0) -> int:
    """유효 참여 비율 (bps)

    override_bps 가 0이 아니면 그대로 사용하고, 아니면 enabled / total 비율을 10000 으로 제한합니다.
    total_count == 0 이면 0.
    """
    if override_bps:
        return override_bps
    if total_count == 0:
        return 0
    return min(enabled_count * BPS_DENOMINATOR // total_count, BPS_DENOMINATOR)


def scale_to_size_decimals(amount: int, base_decimals: int, size_decimals: int) -> int:
    """token0 최소 단위 → 상품 size 단위

    상품 소수점이 더 크면 10^(size - base) 를 곱하고 (오버플로우 검사),
    아니면 10^(base - size) 로 나눕니다 (내림, 잔여 정밀도는 버림).
    """
    if size_decimals > base_decimals:
        return checked_mul(amount, 10 ** (size_decimals - base_decimals))
    return amount // 10 ** (base_decimals - size_decimals)


def compute_target_size(scaled_exposure: int, participation_bps: int) -> int:
    """target = -(scaled_exposure * participation_bps // 10000)

    음수는 token0 노출을 상쇄하는 숏 포지션을 의미합니다.
    """
    hedged = full_mul_div(scaled_exposure, participation_bps, BPS_DENOMINATOR)
    return to_int256(-hedged)


def slippage_limit_price(mark_price: int, slippage_bps: int, is_increasing: bool) -> int:
    """슬리피지를 반영한 지정가

    매수(is_increasing)는 mark * (10000 + slippage) / 10000,
    매도는 mark * (10000 - slippage) / 10000. slippage 0 이면 mark 그대로.
    """
    if slippage_bps < 0 or slippage_bps > BPS_DENOMINATOR:
        raise ValueError(f"slippage_bps 는 0 ~ {BPS_DENOMINATOR} 이어야 합니다: {slippage_bps}")
    if is_increasing:
        factor = BPS_DENOMINATOR + slippage_bps
    else:
        factor = BPS_DENOMINATOR - slippage_bps
    return full_mul_div(mark_price, factor, BPS_DENOMINATOR)


def derive_request_id(
    sequence: int,
    entity_id: str,
    target_size: int,
    size: int,
    hedger_id: str
) -> int:
    """(sequence, entity, target, size, hedger) 에서 결정적 128비트 식별자

    하위 주문 중복 제거용이며 보안 속성은 없습니다.
    """
    payload = f"{sequence}|{entity_id.lower()}|{target_size}|{size}|{hedger_id.lower()}"
    digest = hashlib.sha256(payload.encode("utf-8")).digest()
    return int.from_bytes(digest[:16], "big") & UINT128_MAX


def compute_hedge(request: HedgeRequest) -> Union[HedgeResult, NoAction]:
    """한 번의 리밸런스 계산

    Args:
        request: 호출 시점의 가격/포지션 스냅샷

    Returns:
        HedgeResult, 또는 참여 비율이 0이면 NoAction

    Raises:
        InvalidRange, DivisionByZero, Overflow: 계산 실패. 부분 결과는 반환하지 않습니다.
    """
    participation = request.participation
    participation_bps = resolve_participation_bps(
        participation.enabled_count,
        participation.total_count,
        participation.override_bps,
    )

    if participation_bps == 0:
        logger.debug(
            f"[{request.entity_id}] no participation "
            f"(enabled={participation.enabled_count}, total={participation.total_count})"
        )
        return NoAction(
            reason="zero participation",
            participation_bps=0,
            current_size=request.current_size,
            previous_target=request.previous_target,
        )

    exposure = total_exposure(request.ranges, request.sqrt_price_x96)
    scaled = scale_to_size_decimals(exposure, request.base_decimals, request.size_decimals)
    target = compute_target_size(scaled, participation_bps)
    delta = to_int256(target - request.current_size)

    logger.debug(
        f"[{request.entity_id}] ranges={len(request.ranges)} exposure={exposure} "
        f"scaled={scaled} bps={participation_bps} target={target} "
        f"current={request.current_size} delta={delta}"
    )

    target_changed = request.previous_target is None or request.previous_target != target

    if delta == 0:
        return HedgeResult(
            exposure=exposure,
            scaled_exposure=scaled,
            participation_bps=participation_bps,
            target_size=target,
            current_size=request.current_size,
            delta=0,
            is_increasing=False,
            size=0,
            order_required=False,
            previous_target=request.previous_target,
            target_changed=target_changed,
        )

    is_increasing = delta > 0
    size = abs(delta)

    limit_price = slippage_limit_price(request.mark_price, request.slippage_bps, is_increasing)
    request_id = derive_request_id(
        request.sequence, request.entity_id, target, size, request.hedger_id
    )

    logger.info(
        f"[{request.entity_id}] hedge {'BUY' if is_increasing else 'SELL'} size={size} "
        f"limit={limit_price} target={target} cloid=0x{request_id:032x}"
    )

    return HedgeResult(
        exposure=exposure,
        scaled_exposure=scaled,
        participation_bps=participation_bps,
        target_size=target,
        current_size=request.current_size,
        delta=delta,
        is_increasing=is_increasing,
        size=size,
        order_required=True,
        limit_price=limit_price,
        request_id=request_id,
        previous_target=request.previous_target,
        target_changed=target_changed,
    )
