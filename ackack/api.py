from .client import APIClient
from .resources import AlertsMixin, MonitorsMixin, NotificationsMixin, ReportsMixin, SystemsMixin


class AckAckClient(MonitorsMixin, AlertsMixin, SystemsMixin, ReportsMixin, NotificationsMixin, APIClient):
    """ackack.io API client with typed methods for every collection

    Usage:
        async with AckAckClient(api_key="...") as client:
            monitors = await client.list_monitors()
    """
