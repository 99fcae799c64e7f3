import os
import sys
from dataclasses import dataclass

import pytest

# workers 디렉터리를 Python 경로에 추가
sys.path.append(os.path.join(os.path.dirname(__file__), '../workers'))

os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'testing')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'testing')
os.environ['POWERTOOLS_TRACE_DISABLED'] = 'true'

DLQ_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/my-dlq"

@dataclass
class FakeLambdaContext:
    function_name: str = "lambda-dlq-monitor-framesnap"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:lambda-dlq-monitor-framesnap"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

@pytest.fixture
def lambda_context():
    return FakeLambdaContext()

@pytest.fixture
def dlq_url():
    return DLQ_URL

@pytest.fixture(autouse=True)
def reset_monitor():
    """모듈 싱글톤 및 메트릭 초기화"""
    from dlq_monitor import main
    main.dlq_monitor = None
    main.metrics.clear_metrics()
    yield
    main.dlq_monitor = None
    main.metrics.clear_metrics()
