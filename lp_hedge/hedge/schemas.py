"""
Hedge Request/Result Schemas using Pydantic

Defines the value types consumed and produced by the hedge sizer.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Tuple

from ..config import settings
from ..constants import (
    BPS_DENOMINATOR,
    INT256_MAX,
    INT256_MIN,
    MAX_DECIMALS,
    UINT160_MAX,
    UINT256_MAX,
)
from ..data.types import PriceRange


class Participation(BaseModel):
    """Opt-in snapshot supplied by the participant bookkeeping layer"""
    model_config = ConfigDict(frozen=True)

    enabled_count: int = Field(default=0, description="Participants that opted in", ge=0)
    total_count: int = Field(default=0, description="All participants", ge=0)
    override_bps: int = Field(
        default=0,
        description="Explicit fraction in bps; used instead of the counts when nonzero",
        ge=0,
        le=BPS_DENOMINATOR,
    )

    @classmethod
    def fixed(cls, bps: int) -> "Participation":
        return cls(override_bps=bps)


class HedgeRequest(BaseModel):
    """Inputs for one rebalance computation (a consistent snapshot taken by the caller)"""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "sqrt_price_x96": 118842243771396506390315925504,
                "ranges": [
                    {
                        "sqrt_price_lower": 79228162514264337593543950336,
                        "sqrt_price_upper": 158456325028528675187087900672,
                        "liquidity": 1000000,
                    }
                ],
                "size_decimals": 6,
                "base_decimals": 6,
                "participation": {"enabled_count": 3, "total_count": 4},
                "slippage_bps": 50,
                "mark_price": 3000000000,
                "current_size": 0,
                "sequence": 1024,
                "entity_id": "0x8ad599c3a0ff1de082011efddc58f1908eb6e6d8",
                "hedger_id": "0x0000000000000000000000000000000000000801",
            }
        },
    )

    # uint/int width checks live in validators; Field(ge/le) bounds stay within i64
    sqrt_price_x96: int = Field(..., description="Current sqrt price (Q64.96)")
    ranges: Tuple[PriceRange, ...] = Field(default=(), description="Position ranges")
    size_decimals: int = Field(..., description="Instrument size decimals", ge=0, le=MAX_DECIMALS)
    base_decimals: int = Field(..., description="Base asset native decimals", ge=0, le=MAX_DECIMALS)
    participation: Participation
    slippage_bps: int = Field(
        default_factory=lambda: settings.DEFAULT_SLIPPAGE_BPS,
        description="Slippage tolerance in bps",
        ge=0,
        le=BPS_DENOMINATOR,
    )
    mark_price: int = Field(..., description="Reference mark/oracle price (fixed-point)")
    current_size: int = Field(default=0, description="Current signed derivative position")
    sequence: int = Field(default=0, description="Caller-supplied sequence (e.g. block height)", ge=0)
    entity_id: str = Field(..., description="Hedged entity (vault/pool) identifier")
    hedger_id: str = Field(default_factory=lambda: settings.HEDGER_ID, description="Identifier of the computing party")
    previous_target: Optional[int] = Field(
        default=None, description="Last recorded target, threaded by the caller"
    )

    @field_validator("entity_id", "hedger_id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("sqrt_price_x96")
    @classmethod
    def _check_sqrt_price(cls, value: int) -> int:
        if not 0 <= value <= UINT160_MAX:
            raise ValueError(f"sqrt_price_x96 must fit in uint160, got {value}")
        return value

    @field_validator("mark_price")
    @classmethod
    def _check_mark_price(cls, value: int) -> int:
        if not 0 <= value <= UINT256_MAX:
            raise ValueError(f"mark_price must fit in uint256, got {value}")
        return value

    @field_validator("current_size", "previous_target")
    @classmethod
    def _check_signed_size(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not INT256_MIN <= value <= INT256_MAX:
            raise ValueError(f"position size must fit in int256, got {value}")
        return value

    @field_validator("slippage_bps")
    @classmethod
    def _check_max_slippage(cls, value: int) -> int:
        if value > settings.MAX_SLIPPAGE_BPS:
            raise ValueError(f"slippage_bps {value} exceeds MAX_SLIPPAGE_BPS {settings.MAX_SLIPPAGE_BPS}")
        return value


class HedgeResult(BaseModel):
    """Outcome of one rebalance computation"""
    model_config = ConfigDict(frozen=True)

    exposure: int = Field(..., description="Aggregate base-asset exposure (native decimals)")
    scaled_exposure: int = Field(..., description="Exposure in instrument size decimals")
    participation_bps: int = Field(..., description="Effective participation fraction")
    target_size: int = Field(..., description="Signed target position")
    current_size: int = Field(..., description="Signed position before the adjustment")
    delta: int = Field(..., description="target_size - current_size")
    is_increasing: bool = Field(..., description="True when the adjustment buys (delta > 0)")
    size: int = Field(..., description="abs(delta)")
    order_required: bool = Field(..., description="False when the position already equals the target")
    limit_price: Optional[int] = Field(default=None, description="Slippage-adjusted limit price")
    request_id: Optional[int] = Field(default=None, description="128-bit deterministic order identifier")
    previous_target: Optional[int] = Field(default=None, description="Target recorded before this computation")
    target_changed: bool = Field(..., description="Target differs from previous_target")

    @property
    def client_order_id(self) -> Optional[str]:
        if self.request_id is None:
            return None
        return f"0x{self.request_id:032x}"


class NoAction(BaseModel):
    """Valid no-op outcome: nothing should be hedged (zero participation)"""
    model_config = ConfigDict(frozen=True)

    reason: str
    participation_bps: int = 0
    current_size: int = 0
    previous_target: Optional[int] = None
