import os
from aws_lambda_powertools import Logger

logger = Logger(service="dlq-config")

class ConfigurationError(Exception):
    """필수 설정 누락 예외"""
    pass

def get_required_env(name: str) -> str:
    """필수 환경 변수 조회 (비어 있으면 ConfigurationError)"""
    value = os.environ.get(name, '').strip()
    if not value:
        logger.error(f"필수 환경 변수 누락: {name}")
        raise ConfigurationError(f"{name} 환경 변수가 설정되지 않았습니다.")
    return value
