"""年齢確認API ハンドラー."""
import logging
from typing import Any

from src.api.dependencies import Dependencies
from src.api.request import get_json_body, get_viewer_country
from src.api.response import (
    add_old_enough_cookie,
    default_headers,
    error_response,
    success_response,
)
from src.application.use_cases import VerifyAgeUseCase
from src.domain.value_objects import VerificationRequest

# ロガー設定
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def verify_age(event: dict, context: Any) -> dict:
    """生年月日から国ごとの最低年齢を満たすか判定する.

    POST /age-gate

    Request Body:
        birthday: 生年月日（ISO 8601, YYYY-MM-DD）

    Headers:
        CloudFront-Viewer-Country: リクエスト元の国コード（省略時はNL）

    Returns:
        age, country, message
        年齢要件を満たす場合は set-cookie: old_enough=yes を付与する
    """
    try:
        body = get_json_body(event)
    except ValueError as e:
        return error_response(str(e))

    # ストアの設定不備でもリクエストは失敗させず、デフォルトの最低年齢で判定する
    try:
        policy_store = Dependencies.get_policy_store()
    except (TypeError, ValueError):
        logger.warning("Policy store is unavailable", exc_info=True)
        policy_store = None

    try:
        request = VerificationRequest.from_body(body, get_viewer_country(event))
        use_case = VerifyAgeUseCase(policy_store, Dependencies.get_clock())
        result = use_case.execute(request)
    except Exception:
        logger.exception("Failed to verify age")
        return error_response("Age verification failed")

    headers = default_headers()
    if result.old_enough:
        add_old_enough_cookie(headers)

    return success_response(result.to_dict(), headers=headers)
