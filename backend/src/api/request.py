"""API リクエストユーティリティ."""
import base64
import binascii
import json
import logging
from typing import Any

from src.domain.identifiers import CountryCode

logger = logging.getLogger(__name__)

# 非ストリーミングで受け付けるリクエストボディの上限
MAX_BODY_BYTES = 16 * 1024

# CloudFront が付与する閲覧者の国コード（ISO-3166 alpha-2）
VIEWER_COUNTRY_HEADER = "CloudFront-Viewer-Country"


def get_json_body(event: dict) -> dict[str, Any]:
    """リクエストボディを JSON オブジェクトとして取得する.

    Args:
        event: Lambda イベント

    Returns:
        パースされたボディ

    Raises:
        ValueError: ボディが空、上限超過、JSONオブジェクトでない場合
    """
    body = event.get("body")
    if not body:
        raise ValueError("Request body is empty")

    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Invalid base64 body: {e}")
    elif isinstance(body, str):
        raw = body.encode("utf-8")
    else:
        raise ValueError("Request body must be a string")

    if len(raw) > MAX_BODY_BYTES:
        raise ValueError(f"Request body exceeds {MAX_BODY_BYTES} bytes")

    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid JSON body: {e}")
    except RecursionError:
        # 深いネストはデコーダーの再帰上限を超える
        raise ValueError("Invalid JSON body: nesting is too deep")

    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object")
    return parsed


def get_header(event: dict, name: str) -> str | None:
    """ヘッダーを取得する（大文字小文字を区別しない）.

    Args:
        event: Lambda イベント
        name: ヘッダー名

    Returns:
        ヘッダー値
    """
    headers = event.get("headers") or {}
    # 大文字小文字を区別しない検索
    name_lower = name.lower()
    for key, value in headers.items():
        if key.lower() == name_lower:
            return value

    multi_value_headers = event.get("multiValueHeaders") or {}
    for key, values in multi_value_headers.items():
        if key.lower() == name_lower and values:
            return values[0]
    return None


def get_viewer_country(event: dict) -> CountryCode:
    """リクエスト元の国コードを取得する.

    ヘッダーが無い、または不正な場合はデフォルト（NL）を返す。
    """
    value = get_header(event, VIEWER_COUNTRY_HEADER)
    if not value:
        return CountryCode.default()
    try:
        return CountryCode(value.strip())
    except (TypeError, ValueError):
        logger.warning("Invalid %s header: %r", VIEWER_COUNTRY_HEADER, value)
        return CountryCode.default()
