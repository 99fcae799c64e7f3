"""
공통 모듈 패키지
FrameSnap DLQ 모니터의 공유 유틸리티 및 클래스
"""

__version__ = "1.0.0"
__author__ = "FrameSnap Team"

# 주요 클래스 및 함수 익스포트
from .config import ConfigurationError, get_required_env
from .models import QueueMessage, AlertNotification, ErrorNotification
from .sqs_reader import DeadLetterQueueReader
from .sns_notifier import SnsNotifier

__all__ = [
    'ConfigurationError',
    'get_required_env',
    'QueueMessage',
    'AlertNotification',
    'ErrorNotification',
    'DeadLetterQueueReader',
    'SnsNotifier'
]
