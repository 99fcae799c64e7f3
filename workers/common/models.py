import json
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Any

ALERT_REASON = "Mensagem encontrada na DLQ"
ERROR_REASON = "Erro ao processar DLQ"

def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()

def _dumps(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False)

@dataclass(frozen=True)
class QueueMessage:
    """DLQ에서 수신한 메시지 (본문은 해석하지 않음)"""
    message_id: str
    body: str

    @classmethod
    def from_sqs(cls, message: Dict[str, Any]) -> "QueueMessage":
        return cls(
            message_id=message.get('MessageId', ''),
            body=message.get('Body', '')
        )

@dataclass(frozen=True)
class AlertNotification:
    """DLQ 메시지 1건에 대한 알림"""
    message_id: str
    body: str
    queue_url: str
    timestamp: str = field(default_factory=utc_timestamp)
    error: str = ALERT_REASON

    @classmethod
    def for_message(cls, message: QueueMessage, queue_url: str) -> "AlertNotification":
        return cls(message_id=message.message_id, body=message.body, queue_url=queue_url)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'MessageId': self.message_id,
            'Body': self.body,
            'Timestamp': self.timestamp,
            'Error': self.error,
            'QueueUrl': self.queue_url
        }

    def to_message(self) -> str:
        return _dumps(self.to_dict())

@dataclass(frozen=True)
class ErrorNotification:
    """
    호출 실패 알림
    예외 메시지와 스택 트레이스, 모니터링 대상 큐 주소를 함께 전달
    """
    message: str
    stack_trace: str
    queue_url: str
    timestamp: str = field(default_factory=utc_timestamp)
    error: str = ERROR_REASON

    @classmethod
    def from_exception(cls, exc: BaseException, queue_url: str) -> "ErrorNotification":
        stack_trace = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(message=str(exc), stack_trace=stack_trace, queue_url=queue_url)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'Error': self.error,
            'Message': self.message,
            'StackTrace': self.stack_trace,
            'Timestamp': self.timestamp,
            'QueueUrl': self.queue_url
        }

    def to_message(self) -> str:
        return _dumps(self.to_dict())
