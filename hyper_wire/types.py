from __future__ import annotations

"""Request, wire and signature types.

Wire types carry a ``WIRE_FIELDS`` table of ``(wire key, attribute,
omit_when_none)`` entries in wire order. ``signing.struct_to_map`` walks these
tables; nothing is flattened by reflection.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple

FieldTable = Tuple[Tuple[str, str, bool], ...]


@dataclass(frozen=True)
class AssetInfo:
    """Static per-asset metadata, e.g. from /info meta."""

    asset_id: int
    sz_decimals: int


@dataclass
class LimitOrderType:
    tif: str  # Alo|Ioc|Gtc

    WIRE_FIELDS: ClassVar[FieldTable] = (("tif", "tif", False),)


@dataclass
class TriggerOrderType:
    trigger_px: float
    is_market: bool
    tpsl: str  # tp|sl

    WIRE_FIELDS: ClassVar[FieldTable] = (
        ("triggerPx", "trigger_px", False),
        ("isMarket", "is_market", False),
        ("tpsl", "tpsl", False),
    )


@dataclass
class OrderType:
    """Limit or trigger order type. Exactly one variant must be set."""

    limit: Optional[LimitOrderType] = None
    trigger: Optional[TriggerOrderType] = None

    def __post_init__(self) -> None:
        if (self.limit is None) == (self.trigger is None):
            raise ValueError("OrderType requires exactly one of limit or trigger")

    @classmethod
    def limit_order(cls, tif: str = "Gtc") -> "OrderType":
        return cls(limit=LimitOrderType(tif=tif))

    @classmethod
    def trigger_order(cls, trigger_px: float, is_market: bool, tpsl: str) -> "OrderType":
        return cls(trigger=TriggerOrderType(trigger_px=trigger_px, is_market=is_market, tpsl=tpsl))


@dataclass
class OrderRequest:
    coin: str
    is_buy: bool
    limit_px: float
    sz: float
    reduce_only: bool
    order_type: OrderType
    cloid: Optional[str] = None


@dataclass
class ModifyOrderRequest:
    oid: int
    coin: str
    is_buy: bool
    limit_px: float
    sz: float
    reduce_only: bool
    order_type: OrderType
    cloid: Optional[str] = None


@dataclass
class OrderTypeWire:
    """Wire order type. Only the populated variant is emitted."""

    limit: Optional[LimitOrderType] = None
    trigger: Optional[TriggerOrderType] = None

    WIRE_FIELDS: ClassVar[FieldTable] = (
        ("limit", "limit", True),
        ("trigger", "trigger", True),
    )


@dataclass
class OrderWire:
    asset: int
    is_buy: bool
    limit_px: str
    size_px: str
    reduce_only: bool
    order_type: OrderTypeWire
    cloid: Optional[str] = None

    WIRE_FIELDS: ClassVar[FieldTable] = (
        ("a", "asset", False),
        ("b", "is_buy", False),
        ("p", "limit_px", False),
        ("s", "size_px", False),
        ("r", "reduce_only", False),
        ("t", "order_type", False),
        ("c", "cloid", True),
    )


@dataclass
class ModifyOrderWire:
    oid: int
    order: OrderWire

    WIRE_FIELDS: ClassVar[FieldTable] = (
        ("oid", "oid", False),
        ("order", "order", False),
    )


@dataclass
class PlaceOrderAction:
    orders: List[OrderWire] = field(default_factory=list)
    grouping: str = "na"
    type: str = "order"

    WIRE_FIELDS: ClassVar[FieldTable] = (
        ("type", "type", False),
        ("orders", "orders", False),
        ("grouping", "grouping", False),
    )


@dataclass
class RsvSignature:
    """ECDSA signature split into r/s (0x hex, 32 bytes) and v."""

    r: str
    s: str
    v: int

    WIRE_FIELDS: ClassVar[FieldTable] = (
        ("r", "r", False),
        ("s", "s", False),
        ("v", "v", False),
    )
