"""Casos de uso do serviço de alertas."""

from .subscription_service import (
    ALERT_CONDITIONS,
    AlertSubscriptionService,
    build_alert_message,
)

__all__ = ["ALERT_CONDITIONS", "AlertSubscriptionService", "build_alert_message"]
