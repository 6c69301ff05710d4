from .alerts import AlertsMixin
from .monitors import MonitorsMixin
from .notifications import NotificationsMixin
from .reports import ReportsMixin
from .systems import SystemsMixin

__all__ = ["AlertsMixin", "MonitorsMixin", "NotificationsMixin", "ReportsMixin", "SystemsMixin"]
