"""Alert subscription service dependency container."""

from .container import AlertsContainer, build_alerts_container

__all__ = ["AlertsContainer", "build_alerts_container"]
