from __future__ import annotations

"""注文リクエスト → OrderWire 変換。"""

from typing import List, Mapping, Optional, Sequence, Tuple, Union

from loguru import logger

from .config import GROUPINGS, market_rules, strict_asset_meta
from .errors import AssetNotFoundError
from .types import (
    AssetInfo,
    LimitOrderType,
    ModifyOrderRequest,
    ModifyOrderWire,
    OrderRequest,
    OrderType,
    OrderTypeWire,
    OrderWire,
    PlaceOrderAction,
    TriggerOrderType,
)
from .utils import round_order_price, round_order_size


def _resolve_asset(
    coin: str,
    meta: Mapping[str, AssetInfo],
    is_spot: bool,
    strict: Optional[bool],
) -> Tuple[int, int, int]:
    """(wire 上の asset ID, szDecimals, 小数桁上限) を返す。

    メタデータが無い場合、既定ではゼロ値の AssetInfo で続行する（呼び出し元で
    coin の存在を検証しておくこと）。strict=True（または HL_STRICT_ASSET_META）
    なら AssetNotFoundError を送出する。
    """

    if strict is None:
        strict = strict_asset_meta()
    info = meta.get(coin)
    if info is None:
        if strict:
            raise AssetNotFoundError(coin)
        logger.warning("asset metadata missing for coin={}; using zero-value AssetInfo", coin)
        info = AssetInfo(asset_id=0, sz_decimals=0)
    rules = market_rules(is_spot)
    return info.asset_id + rules.asset_offset, info.sz_decimals, rules.max_decimals


def order_type_to_wire(order_type: OrderType) -> OrderTypeWire:
    """有効なバリアント（limit|trigger）のみをコピーする。"""

    if order_type.limit is not None:
        return OrderTypeWire(limit=LimitOrderType(tif=order_type.limit.tif))
    if order_type.trigger is not None:
        trg = order_type.trigger
        return OrderTypeWire(
            trigger=TriggerOrderType(trigger_px=trg.trigger_px, is_market=trg.is_market, tpsl=trg.tpsl)
        )
    logger.warning("order type has neither limit nor trigger; emitting empty wire type")
    return OrderTypeWire()


def _build_wire(
    req: Union[OrderRequest, ModifyOrderRequest],
    asset: int,
    sz_decimals: int,
    max_decimals: int,
    cloid: Optional[str],
) -> OrderWire:
    wire = OrderWire(
        asset=asset,
        is_buy=bool(req.is_buy),
        limit_px=round_order_price(req.limit_px, sz_decimals, max_decimals),
        size_px=round_order_size(req.sz, sz_decimals),
        reduce_only=bool(req.reduce_only),
        order_type=order_type_to_wire(req.order_type),
        cloid=cloid,
    )
    logger.debug("order wire coin={} a={} p={} s={}", req.coin, wire.asset, wire.limit_px, wire.size_px)
    return wire


def order_request_to_wire(
    req: OrderRequest,
    meta: Mapping[str, AssetInfo],
    is_spot: bool,
    *,
    strict: Optional[bool] = None,
) -> OrderWire:
    """新規注文リクエストを OrderWire に変換する。

    - asset: perp はそのまま、spot は +10000
    - 価格は有効数字 5 桁・小数桁上限（perp 6 / spot 8 − szDecimals）で丸め
    - サイズは szDecimals 桁で丸め
    - is_buy / reduce_only / cloid はそのままコピー
    """

    asset, sz_decimals, max_decimals = _resolve_asset(req.coin, meta, is_spot, strict)
    return _build_wire(req, asset, sz_decimals, max_decimals, req.cloid)


def modify_order_request_to_wire(
    req: ModifyOrderRequest,
    meta: Mapping[str, AssetInfo],
    is_spot: bool,
    *,
    strict: Optional[bool] = None,
) -> ModifyOrderWire:
    """変更リクエストを ModifyOrderWire に変換する（内側の注文に cloid は含めない）。"""

    asset, sz_decimals, max_decimals = _resolve_asset(req.coin, meta, is_spot, strict)
    return ModifyOrderWire(oid=req.oid, order=_build_wire(req, asset, sz_decimals, max_decimals, None))


def order_wires_to_order_action(orders: Sequence[OrderWire], grouping: str = "na") -> PlaceOrderAction:
    """OrderWire 群から /exchange 送信用の order アクションを組み立てる。"""

    if grouping not in GROUPINGS:
        raise ValueError(f"Unknown grouping: {grouping} (expected one of {GROUPINGS})")
    wires: List[OrderWire] = list(orders)
    return PlaceOrderAction(orders=wires, grouping=grouping)
