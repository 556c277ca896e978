from aws_lambda_powertools import Logger


def get_logger(service_name: str) -> Logger:
    """アプリケーション層で使う Powertools Logger を返す

    Handler の Logger() と同じ service 名の子ロガーになり、
    inject_lambda_context で付与されたキー（リクエストIDなど）を引き継ぐ。
    """
    return Logger(service=service_name, child=True)
