"""Use cases for the admin dashboard."""

from __future__ import annotations

from complaintdesk.entities import Complaint, MonthData


class DashboardUseCase:
    """Summary figures shown on the admin dashboard."""

    def __init__(self, dashboard_repo) -> None:
        self.dashboard_repo = dashboard_repo

    def get_total_complaints(self) -> int:
        return self.dashboard_repo.get_total_complaints()

    def get_complaints_by_status(self) -> dict[str, int]:
        return self.dashboard_repo.get_complaints_by_status()

    def get_users_by_year_and_month(self) -> dict[str, list[MonthData]]:
        return self.dashboard_repo.get_users_by_year_and_month()

    def get_latest_complaints(self, limit: int) -> list[Complaint]:
        return self.dashboard_repo.get_latest_complaints(limit)