from __future__ import annotations

"""取引所ルールの定数と環境変数スイッチをまとめたモジュール。

- 価格の小数桁上限（perp: 6 / spot: 8）
- 有効数字の上限（5 桁）
- spot 資産 ID のオフセット（+10000）
- メタデータ欠落時の挙動（HL_STRICT_ASSET_META）
"""

import os
from dataclasses import dataclass


# 小数桁の上限（MAX_DECIMALS）
PERP_MAX_DECIMALS = 6
SPOT_MAX_DECIMALS = 8

# 価格の有効数字上限
MAX_SIGNIFICANT_FIGURES = 5

# https://hyperliquid.gitbook.io/hyperliquid-docs/for-developers/api/asset-ids
SPOT_ASSET_OFFSET = 10_000

# 注文アクションのグルーピング
GROUPINGS = ("na", "normalTpsl", "positionTpsl")


@dataclass(frozen=True)
class MarketRules:
    """市場種別（perp|spot）ごとの変換ルール。"""

    max_decimals: int
    asset_offset: int


PERP_RULES = MarketRules(max_decimals=PERP_MAX_DECIMALS, asset_offset=0)
SPOT_RULES = MarketRules(max_decimals=SPOT_MAX_DECIMALS, asset_offset=SPOT_ASSET_OFFSET)


def market_rules(is_spot: bool) -> MarketRules:
    """市場種別に応じたルールを返す。"""

    return SPOT_RULES if is_spot else PERP_RULES


def strict_asset_meta() -> bool:
    """HL_STRICT_ASSET_META が真なら、メタデータ欠落をエラーとして扱う。

    既定は False（ゼロ値の AssetInfo で続行し、警告ログのみ）。
    """

    raw = os.getenv("HL_STRICT_ASSET_META", "")
    return raw.strip().lower() in {"1", "true", "yes"}
