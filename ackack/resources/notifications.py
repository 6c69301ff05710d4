from typing import AsyncIterator

from ..models import ListNotificationHistoryResponse, NotificationHistory
from ._pagination import iterate_pages, with_page

NOTIFICATIONS_PATH = "/api/v1/notifications"


class NotificationsMixin:

    async def list_notification_history(self, page: int = 0, page_size: int = 0) -> ListNotificationHistoryResponse:
        return await self.get(with_page(NOTIFICATIONS_PATH, page, page_size), response_model=ListNotificationHistoryResponse)

    async def get_notification_history(self, notification_id: str) -> NotificationHistory:
        return await self.get(f"{NOTIFICATIONS_PATH}/{notification_id}", response_model=NotificationHistory)

    def iter_notification_history(self, page_size: int = 50) -> AsyncIterator[NotificationHistory]:
        return iterate_pages(self.list_notification_history, "notifications", page_size=page_size)
