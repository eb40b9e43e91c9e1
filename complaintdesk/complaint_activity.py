"""Use cases for the activity feed of complaints."""

from __future__ import annotations

from collections.abc import Sequence

from complaintdesk.entities import ComplaintActivity


class ComplaintActivityUseCase:
    """Reads and records activity (likes, discussions) on complaints."""

    def __init__(self, repo) -> None:
        self._repo = repo

    def get_by_complaint_ids(
        self, complaint_ids: Sequence[str], activity_type: str
    ) -> list[ComplaintActivity]:
        return self._repo.get_by_complaint_ids(complaint_ids, activity_type)

    def create(self, complaint_activity: ComplaintActivity) -> ComplaintActivity:
        self._repo.create(complaint_activity)
        return complaint_activity

    def delete(self, complaint_activity: ComplaintActivity) -> None:
        self._repo.delete(complaint_activity)

    def update(self, complaint_activity: ComplaintActivity) -> None:
        self._repo.update(complaint_activity)