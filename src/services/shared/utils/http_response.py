import json


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API (payload 2.0) のレスポンスを生成する

    映画タイトルなどの日本語はエスケープせずに返す。
    """
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json; charset=utf-8"},
        "body": json.dumps(body, default=str, ensure_ascii=False),
    }
