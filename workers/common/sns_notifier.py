import boto3
from botocore.config import Config
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

logger = Logger(service="sns-notifier")

def create_sns_client():
    return boto3.client('sns', config=Config(
        retries={'max_attempts': 3, 'mode': 'standard'},
        connect_timeout=10,
        read_timeout=30
    ))

class SnsNotifier:
    """고정 SNS 토픽 발행기"""

    def __init__(self, topic_arn: str, sns_client=None):
        self.topic_arn = topic_arn
        self.client = sns_client if sns_client is not None else create_sns_client()

    def publish(self, subject: str, message: str) -> str:
        """SNS 발행 후 MessageId 반환. 실패 시 원래 예외를 그대로 전파"""
        try:
            response = self.client.publish(
                TopicArn=self.topic_arn,
                Subject=subject,
                Message=message
            )
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            logger.warning(f"SNS 발행 실패 [{error_code}]: {subject}")
            raise
        return response.get('MessageId', '')
