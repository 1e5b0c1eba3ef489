"""ストアに保存された最低年齢の値を整数に変換する."""
import json
from decimal import Decimal, InvalidOperation
from typing import Any

from src.domain.ports import PolicyLookupError


def to_minimum_age(value: Any) -> int:
    """ストアの値を最低年齢に変換する.

    DynamoDB の数値型（Decimal）と、JSON テキストとして保存された数値
    （例: "21"）を受け付ける。

    Raises:
        PolicyLookupError: 値が無い、整数でない、負の場合
    """
    if value is None:
        raise PolicyLookupError("Minimum age value is missing")

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise PolicyLookupError(f"Minimum age is not numeric: {value!r}") from e
        if isinstance(value, str):
            raise PolicyLookupError(f"Minimum age is not numeric: {value!r}")

    # bool は int のサブクラスなので先に弾く
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise PolicyLookupError(f"Minimum age has unexpected type: {type(value).__name__}")

    try:
        decimal_value = Decimal(str(value))
        is_integral = decimal_value.is_finite() and decimal_value == decimal_value.to_integral_value()
    except InvalidOperation as e:
        raise PolicyLookupError(f"Minimum age is not numeric: {value!r}") from e
    if not is_integral:
        raise PolicyLookupError(f"Minimum age is not an integer: {value!r}")

    minimum_age = int(decimal_value)
    if minimum_age < 0:
        raise PolicyLookupError(f"Minimum age cannot be negative: {minimum_age}")
    return minimum_age
