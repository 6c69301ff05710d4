from typing import AsyncIterator

from ..models import CreateReportRequest, ListReportsResponse, Report
from ._pagination import iterate_pages, with_page

REPORTS_PATH = "/api/v1/reports"


class ReportsMixin:

    async def create_report(self, request: CreateReportRequest) -> Report:
        return await self.post(REPORTS_PATH, request, response_model=Report)

    async def get_report(self, report_id: str) -> Report:
        return await self.get(f"{REPORTS_PATH}/{report_id}", response_model=Report)

    async def delete_report(self, report_id: str):
        await self.delete(f"{REPORTS_PATH}/{report_id}")

    async def list_reports(self, page: int = 0, page_size: int = 0) -> ListReportsResponse:
        return await self.get(with_page(REPORTS_PATH, page, page_size), response_model=ListReportsResponse)

    def iter_reports(self, page_size: int = 50) -> AsyncIterator[Report]:
        """Iterate over every report, one page at a time"""
        return iterate_pages(self.list_reports, "reports", page_size=page_size)
