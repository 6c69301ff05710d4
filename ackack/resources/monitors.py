from typing import List

from ..models import (
    CreateMonitorRequest, GetIncidentsResponse, GetResultsResponse, GetUptimeResponse, Incident,
    ListMonitorsResponse, Monitor, MonitorHealthInfo, MonitorHealthResponse, MonitorResult,
    UpdateMonitorRequest,
)
from ._query import with_query

MONITORS_PATH = "/api/v1/monitors"


class MonitorsMixin:

    async def create_monitor(self, request: CreateMonitorRequest) -> Monitor:
        return await self.post(MONITORS_PATH, request, response_model=Monitor)

    async def get_monitor(self, monitor_id: str) -> Monitor:
        return await self.get(f"{MONITORS_PATH}/{monitor_id}", response_model=Monitor)

    async def update_monitor(self, monitor_id: str, request: UpdateMonitorRequest) -> Monitor:
        return await self.put(f"{MONITORS_PATH}/{monitor_id}", request, response_model=Monitor)

    async def delete_monitor(self, monitor_id: str):
        await self.delete(f"{MONITORS_PATH}/{monitor_id}")

    async def list_monitors(self) -> List[Monitor]:
        response = await self.get(MONITORS_PATH, response_model=ListMonitorsResponse)
        return response.monitors if response else []

    async def get_monitor_results(self, monitor_id: str, limit: int = 0) -> List[MonitorResult]:
        """Recent check results, newest first; ``limit`` of 0 leaves the count to the server"""
        path = with_query(f"{MONITORS_PATH}/{monitor_id}/results", limit=limit)
        response = await self.get(path, response_model=GetResultsResponse)
        return response.results if response else []

    async def get_monitor_uptime(self, monitor_id: str, hours: int = 0) -> GetUptimeResponse:
        path = with_query(f"{MONITORS_PATH}/{monitor_id}/uptime", hours=hours)
        return await self.get(path, response_model=GetUptimeResponse)

    async def get_monitor_incidents(self, monitor_id: str, limit: int = 0) -> List[Incident]:
        path = with_query(f"{MONITORS_PATH}/{monitor_id}/incidents", limit=limit)
        response = await self.get(path, response_model=GetIncidentsResponse)
        return response.incidents if response else []

    async def get_monitor_health(self, monitor_id: str) -> MonitorHealthInfo:
        return await self.get(f"{MONITORS_PATH}/{monitor_id}/health", response_model=MonitorHealthInfo)

    async def get_all_monitor_health(self) -> MonitorHealthResponse:
        return await self.get(f"{MONITORS_PATH}/health", response_model=MonitorHealthResponse)
