from __future__ import annotations

"""署名ペイロードの組み立て（EIP-712 署名そのものは外部で行う）。

- wire 構造体 → dict への展開（型ごとの WIRE_FIELDS テーブルを使用）
- r/s/v → RsvSignature（0x 付き 16 進文字列）
- 16 進文字列（アドレス/ハッシュ）→ bytes
- アクションの msgpack / JSON エンコード
"""

import json
import math
from typing import Any, Dict, Mapping, Optional, Union

import msgpack  # type: ignore
from eth_utils import decode_hex, to_hex  # type: ignore

from .errors import DecodeError, SerializationError
from .types import RsvSignature


def _wire_value(value: Any, owner: str, field: Optional[str]) -> Any:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(f"Non-finite float in {owner}.{field}: {value}", owner, field)
        return value
    if isinstance(value, (list, tuple)):
        return [_wire_value(v, owner, field) for v in value]
    if isinstance(value, Mapping):
        out: Dict[str, Any] = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise SerializationError(f"Non-string key {k!r} in {owner}.{field}", owner, field)
            out[k] = _wire_value(v, owner, field)
        return out
    if hasattr(type(value), "WIRE_FIELDS"):
        return struct_to_map(value)
    raise SerializationError(
        f"Unsupported value of type {type(value).__name__} in {owner}.{field}", owner, field
    )


def struct_to_map(strct: Any) -> Dict[str, Any]:
    """wire 構造体を WIRE_FIELDS の順序どおりに dict へ展開する。

    テーブルを持たない型や、表現できない値（非有限の float など）は
    SerializationError を送出する。
    """

    owner = type(strct).__name__
    table = getattr(type(strct), "WIRE_FIELDS", None)
    if table is None:
        raise SerializationError(f"{owner} has no wire field table", owner)
    res: Dict[str, Any] = {}
    for key, attr, omit_none in table:
        value = getattr(strct, attr)
        if value is None and omit_none:
            continue
        res[key] = _wire_value(value, owner, attr)
    return res


def _sig_part(part: Union[bytes, int], name: str) -> str:
    if isinstance(part, int):
        if part < 0 or part >= 1 << 256:
            raise ValueError(f"{name} does not fit in 32 bytes: {part}")
        raw = part.to_bytes(32, "big")
    else:
        raw = bytes(part)
        if len(raw) > 32:
            raise ValueError(f"{name} must be at most 32 bytes, got {len(raw)}")
        raw = raw.rjust(32, b"\x00")
    return to_hex(raw)


def to_typed_sig(r: Union[bytes, int], s: Union[bytes, int], v: int) -> RsvSignature:
    """r/s（32 バイト）と v（リカバリ ID）を wire 形式の署名に変換する。"""

    v = int(v)
    if not 0 <= v <= 255:
        raise ValueError(f"v must fit in one byte, got {v}")
    return RsvSignature(r=_sig_part(r, "r"), s=_sig_part(s, "s"), v=v)


def hex_to_bytes(text: str) -> bytes:
    """16 進文字列（0x 有無どちらも可）を bytes に変換する。

    不正な入力は切り捨てずに DecodeError を送出する。
    """

    if not isinstance(text, str):
        raise DecodeError(text, "expected str")
    try:
        return decode_hex(text)
    except ValueError as exc:
        raise DecodeError(text, str(exc)) from exc


def pack_action(action: Any) -> bytes:
    """アクションを msgpack でエンコードする（アクションハッシュの入力）。"""

    return msgpack.packb(struct_to_map(action))


def struct_to_json(strct: Any) -> str:
    """送信用のコンパクトな JSON 文字列を返す。"""

    return json.dumps(struct_to_map(strct), ensure_ascii=False, separators=(",", ":"))
