"""注文アクションの wire ペイロードを組み立てて表示する（送信・署名はしない）。

使い方:
  python scripts/build_order_payload.py --symbol ETH --asset-id 1 --sz-decimals 4 --side buy --size 1.23456 --price 3456.78
  python scripts/build_order_payload.py --symbol PURR --asset-id 7 --sz-decimals 0 --spot --side sell --size 100 --price 0.000123456 --tif Ioc
  python scripts/build_order_payload.py --symbol BTC --asset-id 0 --sz-decimals 5 --side sell --size 0.01 --price 60000 \
      --trigger-px 60500 --tpsl sl --reduce-only --grouping positionTpsl
"""

import argparse
import sys
import uuid

from loguru import logger

from hyper_wire.errors import HyperWireError
from hyper_wire.orders import order_request_to_wire, order_wires_to_order_action
from hyper_wire.signing import pack_action, struct_to_json
from hyper_wire.types import AssetInfo, OrderRequest, OrderType


def _cloid() -> str:
    return "0x" + uuid.uuid4().hex


def main() -> None:
    p = argparse.ArgumentParser(description="Hyperliquid order アクションの wire 形式を表示する")
    p.add_argument("--symbol", required=True, help="シンボル（例: BTC, ETH）")
    p.add_argument("--asset-id", type=int, required=True, help="/info meta 上の資産 ID")
    p.add_argument("--sz-decimals", type=int, required=True, help="資産の szDecimals")
    p.add_argument("--spot", action="store_true", help="spot 市場として変換する（asset +10000, 小数 8 桁）")
    p.add_argument("--side", choices=["buy", "sell"], required=True)
    p.add_argument("--size", type=float, required=True)
    p.add_argument("--price", type=float, required=True, help="指値（トリガ注文では約定指値）")
    p.add_argument("--tif", choices=["Alo", "Ioc", "Gtc"], default="Gtc")
    p.add_argument("--trigger-px", type=float, default=None, help="指定するとトリガ注文（TP/SL）になる")
    p.add_argument("--tpsl", choices=["tp", "sl"], default="sl")
    p.add_argument("--limit-trigger", action="store_true", help="トリガ発動後を指値にする（既定は成行）")
    p.add_argument("--reduce-only", action="store_true")
    p.add_argument("--grouping", default="na", help="na|normalTpsl|positionTpsl")
    p.add_argument("--no-cloid", action="store_true", help="cloid を付与しない")
    args = p.parse_args()

    if args.trigger_px is not None:
        order_type = OrderType.trigger_order(
            trigger_px=args.trigger_px, is_market=not args.limit_trigger, tpsl=args.tpsl
        )
    else:
        order_type = OrderType.limit_order(args.tif)

    req = OrderRequest(
        coin=args.symbol.upper(),
        is_buy=(args.side == "buy"),
        limit_px=args.price,
        sz=args.size,
        reduce_only=args.reduce_only,
        order_type=order_type,
        cloid=None if args.no_cloid else _cloid(),
    )
    meta = {req.coin: AssetInfo(asset_id=args.asset_id, sz_decimals=args.sz_decimals)}

    try:
        wire = order_request_to_wire(req, meta, args.spot, strict=True)
        action = order_wires_to_order_action([wire], grouping=args.grouping)
    except (HyperWireError, ValueError) as e:
        logger.error("ペイロードを構築できません: {}", e)
        sys.exit(1)

    logger.info("wire 価格={} サイズ={} (asset={})", wire.limit_px, wire.size_px, wire.asset)
    print(struct_to_json(action))
    packed = pack_action(action)
    logger.info("msgpack ({} bytes): {}", len(packed), packed.hex())


if __name__ == "__main__":
    main()
