from typing import List

from ..models import Alert, CreateAlertRequest, ListAlertsResponse, UpdateAlertRequest

ALERTS_PATH = "/api/v1/alerts"


class AlertsMixin:

    async def create_alert(self, request: CreateAlertRequest) -> Alert:
        return await self.post(ALERTS_PATH, request, response_model=Alert)

    async def get_alert(self, alert_id: str) -> Alert:
        return await self.get(f"{ALERTS_PATH}/{alert_id}", response_model=Alert)

    async def update_alert(self, alert_id: str, request: UpdateAlertRequest) -> Alert:
        return await self.put(f"{ALERTS_PATH}/{alert_id}", request, response_model=Alert)

    async def delete_alert(self, alert_id: str):
        await self.delete(f"{ALERTS_PATH}/{alert_id}")

    async def list_alerts(self) -> List[Alert]:
        response = await self.get(ALERTS_PATH, response_model=ListAlertsResponse)
        return response.alerts if response else []
