from __future__ import annotations

"""価格/サイズの丸めと文字列化。

- 小数桁上限つきの 10 進文字列化（末尾の 0 と "." を除去）
- 価格: 有効数字 5 桁 + 小数桁上限（MAX_DECIMALS - szDecimals）
- サイズ: szDecimals 桁で丸め

参考: https://hyperliquid.gitbook.io/hyperliquid-docs/for-developers/api/tick-and-lot-size
"""

import math

import numpy as np

from .config import MAX_SIGNIFICANT_FIGURES


def _check_finite(value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value}")


def _strip_fraction_zeros(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-", "-0"):
        return "0"
    return text


def format_decimal(value: float, max_decimals: int) -> str:
    """value を小数 max_decimals 桁以内の最短 10 進文字列にする。

    - max_decimals == 0 の場合は丸めず、往復可能な最短表現（指数表記なし）
    - それ以外は 10^桁 倍 → 最近接整数へ丸め → 戻して固定桁で整形
    - 末尾の 0 と "." は除去する（整数なら小数点なし）
    """

    _check_finite(value)
    value = float(value) + 0.0  # -0.0 を 0.0 に正規化
    if max_decimals <= 0:
        text = np.format_float_positional(value, unique=True, trim="-")
        return _strip_fraction_zeros(text)

    scale = 10 ** max_decimals
    scaled = value * scale
    rounded = round(scaled) / scale if math.isfinite(scaled) else value
    return _strip_fraction_zeros(f"{rounded + 0.0:.{max_decimals}f}")


def round_order_size(value: float, sz_decimals: int) -> str:
    """サイズを szDecimals 桁に丸めた文字列を返す（末尾 0 は除去）。"""

    return format_decimal(value, sz_decimals)


def trim_decimal_zeros(text: str) -> str:
    """小数部末尾の 0 を除去する。ただし小数部が空になる場合は ".0" を残す。

    例: "3.00" → "3.0" / "3" → "3.0" / "0.1230" → "0.123"
    """

    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    return f"{whole or '0'}.{fraction or '0'}"


def _format_price_digits(value: float, digits: int) -> str:
    # 1 以上で小数 0 桁の価格は整数に丸める（最短表現のままだと桁上限を超えうる）
    if digits <= 0:
        return format_decimal(float(round(value)), 0)
    return format_decimal(value, digits)


def _truncate_significant(text: str, allowed: int) -> str:
    whole, dot, fraction = text.partition(".")
    if not dot:
        return text
    started = False
    for i, ch in enumerate(fraction):
        if ch == "0" and not started:
            continue
        started = True
        allowed -= 1
        if allowed <= 0:
            return f"{whole}.{fraction[:i + 1]}"
    return text


def round_order_price(value: float, sz_decimals: int, max_decimals: int) -> str:
    """価格を有効数字 5 桁・小数桁上限（max_decimals - sz_decimals）に丸める。

    - 整数部が 5 桁以上: 整数に丸めて返す
    - 1 以上: min(残り有効桁, 小数桁上限) 桁で丸める
    - 1 未満: 小数桁上限で丸めた後（上限 0 なら最短表現）、先頭の 0 を除いた有効桁数で切り捨てる
    - 整数部のみの結果は "3.0" のように小数点と 0 を 1 つ残す
    """

    _check_finite(value)
    if value < 0:
        text = round_order_price(-value, sz_decimals, max_decimals)
        return text if float(text) == 0 else f"-{text}"

    allowed_decimals = max(max_decimals - sz_decimals, 0)
    integer_digits = len(str(int(value)))
    if integer_digits >= MAX_SIGNIFICANT_FIGURES:
        return _format_price_digits(value, 0)

    allowed_sig = MAX_SIGNIFICANT_FIGURES - integer_digits
    if value < 1:
        # 小数 0 桁なら最短表現のまま有効桁で切り捨てる
        text = format_decimal(value, allowed_decimals)
        return trim_decimal_zeros(_truncate_significant(text, allowed_sig))
    return trim_decimal_zeros(_format_price_digits(value, min(allowed_sig, allowed_decimals)))


def float_to_wire(value: float, max_decimals: int) -> str:
    """汎用の float → 文字列変換。小数桁は max_decimals から整数部の桁数を引いた値。"""

    _check_finite(value)
    integer_digits = len(str(int(value)))
    digits = max(max_decimals - integer_digits, 0)
    return _strip_fraction_zeros(f"{float(value) + 0.0:.{digits}f}")
