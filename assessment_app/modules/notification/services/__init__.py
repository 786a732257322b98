from .delivery_service import DeliveryService, NotificationDispatchError
from .report_service import build_report

__all__ = ["DeliveryService", "NotificationDispatchError", "build_report"]
