"""Exceptions raised while building wire payloads."""

from typing import Any, Dict, Optional


class HyperWireError(Exception):
    """Base exception for wire conversion errors."""

    def __init__(
        self,
        message: str,
        error_type: str = "HyperWireError",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a dictionary suitable for logs or API responses."""
        result: Dict[str, Any] = {
            "error": self.message,
            "error_type": self.error_type,
        }
        if self.details:
            result["details"] = self.details
        return result


class SerializationError(HyperWireError):
    """Raised when a struct cannot be flattened into a wire mapping."""

    def __init__(self, message: str, type_name: str, field: Optional[str] = None):
        details: Dict[str, Any] = {"type": type_name}
        if field is not None:
            details["field"] = field
        super().__init__(
            message=message,
            error_type="SerializationError",
            details=details,
        )
        self.type_name = type_name
        self.field = field


class DecodeError(HyperWireError):
    """Raised when a hex string (address, hash) cannot be decoded."""

    def __init__(self, value: Any, reason: Optional[str] = None):
        message = f"Invalid hex input: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            error_type="DecodeError",
            details={"value": value},
        )
        self.value = value


class AssetNotFoundError(HyperWireError):
    """Raised in strict mode when a coin has no asset metadata."""

    def __init__(self, coin: str):
        super().__init__(
            message=f"Asset metadata not found: {coin}",
            error_type="AssetNotFoundError",
            details={"coin": coin},
        )
        self.coin = coin
