from typing import Dict, List, Any, Optional
from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from common.config import get_required_env
from common.models import QueueMessage, AlertNotification, ErrorNotification
from common.sqs_reader import DeadLetterQueueReader
from common.sns_notifier import SnsNotifier

logger = Logger(service="dlq-monitor")
tracer = Tracer(service="dlq-monitor")
metrics = Metrics(namespace="FrameSnap/DLQ", service="dlq-monitor")

SNS_TOPIC_ARN = "arn:aws:sns:us-east-1:339713138979:notificacoes-frameSnap"
ALERT_SUBJECT = "🚨 Alerta: Mensagens na DLQ - FrameSnap"
ERROR_SUBJECT = "❌ Erro: Lambda DLQ Monitor - FrameSnap"

class DlqMonitor:
    """DLQ 폴링 후 메시지별 SNS 알림 발송"""

    def __init__(
        self,
        queue_url: Optional[str],
        sqs_client=None,
        sns_client=None,
        topic_arn: str = SNS_TOPIC_ARN
    ):
        self.reader = DeadLetterQueueReader(queue_url, sqs_client=sqs_client)
        self.notifier = SnsNotifier(topic_arn, sns_client=sns_client)

    @property
    def queue_url(self) -> str:
        return self.reader.queue_url

    @classmethod
    def from_environment(cls) -> "DlqMonitor":
        return cls(get_required_env('DLQ_URL'))

    @tracer.capture_method
    def receive_messages(self) -> List[QueueMessage]:
        return self.reader.receive()

    @tracer.capture_method
    def send_alert(self, message: QueueMessage) -> str:
        notification = AlertNotification.for_message(message, self.queue_url)
        return self.notifier.publish(ALERT_SUBJECT, notification.to_message())

    @tracer.capture_method
    def send_error_notification(self, exc: Exception) -> str:
        notification = ErrorNotification.from_exception(exc, self.queue_url)
        return self.notifier.publish(ERROR_SUBJECT, notification.to_message())

    def run(self, event: Any = None) -> Dict[str, Any]:
        """
        한 번의 호출 처리
        수신 또는 발행 중 예외가 나면 오류 알림을 보낸 뒤 원래 예외를 다시 발생시킴.
        이미 보낸 알림은 되돌리지 않음.
        """
        sent_count = 0
        try:
            messages = self.receive_messages()
            metrics.add_metric(name="DlqMessagesFound", unit=MetricUnit.Count, value=len(messages))

            if messages:
                for message in messages:
                    self.send_alert(message)
                    sent_count += 1
                    logger.info(
                        f"Notificação enviada para mensagem {message.message_id}",
                        extra={'message_id': message.message_id}
                    )
            else:
                logger.info("Nenhuma mensagem encontrada na DLQ")

        except Exception as e:
            metrics.add_metric(name="DlqMonitorErrors", unit=MetricUnit.Count, value=1)
            # 오류 알림 발행 자체가 실패하면 그 예외가 원래 예외 대신 전파됨
            self.send_error_notification(e)
            logger.error(f"Erro ao processar DLQ: {e}", exc_info=True)
            raise
        finally:
            if sent_count:
                metrics.add_metric(name="AlertNotificationsSent", unit=MetricUnit.Count, value=sent_count)

        return {
            'statusCode': 200,
            'messages_found': len(messages),
            'notifications_sent': sent_count
        }

dlq_monitor = None

def get_dlq_monitor() -> DlqMonitor:
    """실행 환경당 1회 생성 (DLQ_URL 누락 시 여기서 실패)"""
    global dlq_monitor
    if dlq_monitor is None:
        dlq_monitor = DlqMonitor.from_environment()
    return dlq_monitor

@logger.inject_lambda_context
@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """DLQ 모니터 Lambda 진입점"""
    monitor = get_dlq_monitor()
    return monitor.run(event)
