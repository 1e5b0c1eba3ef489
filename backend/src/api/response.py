"""API レスポンスユーティリティ."""
import json
from http.cookies import SimpleCookie
from typing import Any

POWERED_BY = "Akamai EdgeWorkers: 0.0.16"

OLD_ENOUGH_COOKIE_NAME = "old_enough"
OLD_ENOUGH_COOKIE_VALUE = "yes"


def default_headers() -> dict[str, list[str]]:
    """全レスポンス共通のヘッダーを生成する."""
    return {
        "Powered-By": [POWERED_BY],
        "content-type": ["application/json"],
    }


def old_enough_cookie() -> str:
    """年齢確認済みを示す Set-Cookie の値を生成する."""
    cookie = SimpleCookie()
    cookie[OLD_ENOUGH_COOKIE_NAME] = OLD_ENOUGH_COOKIE_VALUE
    return cookie[OLD_ENOUGH_COOKIE_NAME].OutputString()


def add_old_enough_cookie(headers: dict[str, list[str]]) -> None:
    """ヘッダーに年齢確認済みの Cookie を追加する."""
    headers.setdefault("set-cookie", []).append(old_enough_cookie())


def json_response(
    body: Any, status_code: int = 200, headers: dict[str, list[str]] | None = None,
) -> dict:
    """レスポンスを生成する.

    Args:
        body: レスポンスボディ
        status_code: HTTPステータスコード
        headers: ヘッダー（省略時は共通ヘッダー）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    return {
        "statusCode": status_code,
        "multiValueHeaders": headers if headers is not None else default_headers(),
        "body": json.dumps(body, ensure_ascii=False),
    }


def success_response(body: Any, headers: dict[str, list[str]] | None = None) -> dict:
    """200 OKレスポンスを生成する."""
    return json_response(body, status_code=200, headers=headers)


def error_response(message: str, status_code: int = 503) -> dict:
    """エラーレスポンスを生成する.

    プラットフォーム側の汎用エラーにしないよう、
    {"error": message} 形式のボディで応答する。
    """
    return json_response({"error": message}, status_code=status_code)
