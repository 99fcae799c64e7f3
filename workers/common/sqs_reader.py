import boto3
from typing import List, Optional
from botocore.config import Config
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

from .config import ConfigurationError
from .models import QueueMessage

logger = Logger(service="sqs-reader")

MAX_NUMBER_OF_MESSAGES = 10
WAIT_TIME_SECONDS = 20

def create_sqs_client():
    """롱 폴링 대기 시간보다 긴 읽기 타임아웃을 가진 SQS 클라이언트"""
    return boto3.client('sqs', config=Config(
        retries={'max_attempts': 3, 'mode': 'standard'},
        read_timeout=WAIT_TIME_SECONDS + 10,
        connect_timeout=10
    ))

class DeadLetterQueueReader:
    """DLQ 메시지 수신기 (삭제/가시성 변경 없음)"""

    def __init__(self, queue_url: Optional[str], sqs_client=None):
        if not queue_url:
            raise ConfigurationError("DLQ URL이 설정되지 않았습니다.")
        self.queue_url = queue_url
        self.client = sqs_client if sqs_client is not None else create_sqs_client()

    def receive(self) -> List[QueueMessage]:
        """최대 10건, 20초 롱 폴링으로 메시지 수신"""
        try:
            response = self.client.receive_message(
                QueueUrl=self.queue_url,
                MaxNumberOfMessages=MAX_NUMBER_OF_MESSAGES,
                WaitTimeSeconds=WAIT_TIME_SECONDS
            )
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            logger.warning(f"DLQ 수신 실패 [{error_code}]: {self.queue_url}")
            raise

        messages = [QueueMessage.from_sqs(m) for m in response.get('Messages', [])]
        logger.debug(f"DLQ 수신 완료: {len(messages)}건")
        return messages
