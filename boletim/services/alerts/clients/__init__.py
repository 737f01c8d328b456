"""Clientes HTTP utilizados pelo serviço de alertas."""

from .webhook_alert_notifier import WebhookAlertNotifier

__all__ = ["WebhookAlertNotifier"]
