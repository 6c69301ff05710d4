from typing import List

from ..models import (
    CreateSystemRequest, ListSystemsResponse, ModifyMonitorsRequest, System, SystemWithStats,
    UpdateSystemRequest,
)

SYSTEMS_PATH = "/api/v1/systems"


class SystemsMixin:

    async def create_system(self, request: CreateSystemRequest) -> System:
        return await self.post(SYSTEMS_PATH, request, response_model=System)

    async def get_system(self, system_id: str) -> SystemWithStats:
        return await self.get(f"{SYSTEMS_PATH}/{system_id}", response_model=SystemWithStats)

    async def update_system(self, system_id: str, request: UpdateSystemRequest) -> System:
        return await self.put(f"{SYSTEMS_PATH}/{system_id}", request, response_model=System)

    async def delete_system(self, system_id: str):
        await self.delete(f"{SYSTEMS_PATH}/{system_id}")

    async def list_systems(self) -> List[SystemWithStats]:
        response = await self.get(SYSTEMS_PATH, response_model=ListSystemsResponse)
        return response.systems if response else []

    async def add_monitors_to_system(self, system_id: str, monitor_ids: List[str]):
        await self.post(f"{SYSTEMS_PATH}/{system_id}/monitors", ModifyMonitorsRequest(monitor_ids=monitor_ids))

    async def remove_monitors_from_system(self, system_id: str, monitor_ids: List[str]):
        # The API takes the IDs to drop as a DELETE body
        await self.delete(f"{SYSTEMS_PATH}/{system_id}/monitors", ModifyMonitorsRequest(monitor_ids=monitor_ids))
