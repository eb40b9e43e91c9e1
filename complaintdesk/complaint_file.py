"""Use cases for files attached to complaints."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from complaintdesk.entities import ComplaintFile


class ComplaintFileUseCase:
    """Uploads complaint attachments to storage and records where they live."""

    def __init__(self, repository, storage) -> None:
        self._repo = repository
        self._storage = storage

    def create(self, files: Sequence[Any], complaint_id: str) -> list[ComplaintFile]:
        paths = self._storage.upload(files)
        complaint_files = [ComplaintFile(complaint_id=complaint_id, path=path) for path in paths]
        self._repo.create(complaint_files)
        return complaint_files

    def delete_by_complaint_id(self, complaint_id: str) -> None:
        self._repo.delete_by_complaint_id(complaint_id)