"""Use cases for complaints."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from complaintdesk.entities import (
    Complaint,
    ComplaintFile,
    ComplaintProcess,
    ComplaintStatus,
    Metadata,
    Pagination,
    generate_id,
)
from complaintdesk.errors import (
    AllFieldsMustBeFilledError,
    CategoryNotFoundError,
    ColumnsDoesntMatchError,
    IDMustBeFilledError,
    InternalServerError,
    InvalidCategoryIDFormatError,
    InvalidIDFormatError,
    InvalidStatusError,
    LimitMustBeFilledError,
    PageMustBeFilledError,
    RegencyNotFoundError,
)

_REGENCY_REFERENCE = "REFERENCES `regencies` (`id`))"
_CATEGORY_REFERENCE = "REFERENCES `categories` (`id`))"
_ADMIN_ROLES = frozenset({"admin", "super_admin"})
_IMPORT_COLUMNS = 9
_IMPORT_ADMIN_ID = 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

_STEP_MESSAGES = {
    ComplaintStatus.PENDING.value: "Aduan anda sedang dalam proses verifikasi oleh admin kami",
    ComplaintStatus.VERIFIED.value: "Aduan anda telah diverifikasi oleh admin kami",
    ComplaintStatus.ON_PROGRESS.value: "Aduan anda sedang dalam proses penanganan",
    ComplaintStatus.FINISHED.value: "Aduan anda telah selesai ditangani",
    ComplaintStatus.REJECTED.value: (
        "Aduan anda ditolak karena tidak sesuai dengan ketentuan yang berlaku"
    ),
}

_HISTORY = {
    ComplaintStatus.PENDING.value: (ComplaintStatus.PENDING,),
    ComplaintStatus.VERIFIED.value: (ComplaintStatus.PENDING, ComplaintStatus.VERIFIED),
    ComplaintStatus.ON_PROGRESS.value: (
        ComplaintStatus.PENDING,
        ComplaintStatus.VERIFIED,
        ComplaintStatus.ON_PROGRESS,
    ),
    ComplaintStatus.FINISHED.value: (
        ComplaintStatus.PENDING,
        ComplaintStatus.VERIFIED,
        ComplaintStatus.ON_PROGRESS,
        ComplaintStatus.FINISHED,
    ),
    ComplaintStatus.REJECTED.value: (ComplaintStatus.PENDING, ComplaintStatus.REJECTED),
}

RowsReader = Callable[[Any], Sequence[Sequence[str]]]


def _parse_int(text: str, error: type[Exception]) -> int:
    if not _INTEGER.fullmatch(text):
        raise error()
    return int(text)


def _parse_date(text: str) -> datetime | None:
    try:
        return datetime.strptime(text, "%d-%m-%Y")
    except ValueError:
        return None


def _history_for(status: str) -> list[ComplaintProcess]:
    return [
        ComplaintProcess(
            admin_id=_IMPORT_ADMIN_ID,
            status=step.value,
            message=_STEP_MESSAGES[step.value],
        )
        for step in _HISTORY.get(status, ())
    ]


def _reference_error(exc: Exception) -> Exception | None:
    text = str(exc)
    if text.endswith(_REGENCY_REFERENCE):
        return RegencyNotFoundError()
    if text.endswith(_CATEGORY_REFERENCE):
        return CategoryNotFoundError()
    return None


def build_pagination(limit: int, page: int, total_data: int) -> Pagination:
    if not (limit and page):
        return Pagination(
            first_page=1,
            last_page=1,
            current_page=1,
            total_data_per_page=total_data,
        )
    last_page = (total_data + limit - 1) // limit
    if total_data == 0:
        per_page = 0
        last_page = 1
    elif page == last_page:
        per_page = total_data - (last_page - 1) * limit
    else:
        per_page = limit
    return Pagination(
        first_page=1,
        last_page=last_page,
        current_page=page,
        total_data_per_page=per_page,
        prev_page=page - 1 if page > 1 else 0,
        next_page=page + 1 if page < last_page else 0,
    )


class ComplaintUseCase:
    """Business rules for creating, reading, changing and importing complaints.

    ``rows_reader`` turns an uploaded spreadsheet into rows of cell strings,
    the first row being a header.
    """

    def __init__(self, complaint_repo, complaint_file_repo, rows_reader: RowsReader) -> None:
        self._repo = complaint_repo
        self._file_repo = complaint_file_repo
        self._rows_reader = rows_reader

    def get_paginated(
        self,
        limit: int,
        page: int,
        search: str,
        filter: dict,
        sort_by: str = "",
        sort_type: str = "",
    ) -> list[Complaint]:
        if limit and not page:
            raise PageMustBeFilledError()
        if page and not limit:
            raise LimitMustBeFilledError()
        sort_by = sort_by or "created_at"
        sort_type = sort_type or "DESC"
        try:
            return self._repo.get_paginated(limit, page, search, filter, sort_by, sort_type)
        except Exception as exc:
            raise InternalServerError() from exc

    def get_metadata(self, limit: int, page: int, search: str, filter: dict) -> Metadata:
        try:
            metadata = self._repo.get_metadata(limit, page, search, filter)
        except Exception as exc:
            raise InternalServerError() from exc
        return dataclasses.replace(
            metadata, pagination=build_pagination(limit, page, metadata.total_data)
        )

    def get_by_id(self, complaint_id: str) -> Complaint:
        return self._repo.get_by_id(complaint_id)

    def get_by_user_id(self, user_id: int) -> list[Complaint]:
        return self._repo.get_by_user_id(user_id)

    def create(self, complaint: Complaint) -> Complaint:
        if not complaint.is_complete():
            raise AllFieldsMustBeFilledError()
        complaint.id = generate_id("C-", 10)
        try:
            self._repo.create(complaint)
        except Exception as exc:
            raise (_reference_error(exc) or InternalServerError()) from exc
        return complaint

    def delete(self, complaint_id: str, user_id: int, role: str) -> None:
        if role in _ADMIN_ROLES:
            self._repo.admin_delete(complaint_id)
        else:
            self._repo.delete(complaint_id, user_id)

    def update(self, complaint: Complaint) -> Complaint:
        if not complaint.is_complete():
            raise AllFieldsMustBeFilledError()
        try:
            return self._repo.update(complaint)
        except Exception as exc:
            mapped = _reference_error(exc)
            if mapped is None:
                raise
            raise mapped from exc

    def update_status(self, complaint_id: str, status: str) -> None:
        if status not in ComplaintStatus.values():
            raise InvalidStatusError()
        if not complaint_id:
            raise IDMustBeFilledError()
        self._repo.update_status(complaint_id, status)

    def import_file(self, file) -> None:
        """Read complaints from a spreadsheet and store them all at once."""
        rows = self._rows_reader(file)
        complaints = []
        for row in list(rows)[1:]:
            if len(row) < _IMPORT_COLUMNS:
                raise ColumnsDoesntMatchError()
            user_id = _parse_int(row[0], InvalidIDFormatError)
            category_id = _parse_int(row[1], InvalidCategoryIDFormatError)
            regency_id, address, description, status, complaint_type, date_text, paths = row[2:9]
            complaints.append(
                Complaint(
                    id=generate_id("C-", 10),
                    user_id=user_id,
                    category_id=category_id,
                    regency_id=regency_id,
                    address=address,
                    description=description,
                    status=status,
                    type=complaint_type,
                    date=_parse_date(date_text),
                    files=[ComplaintFile(path=path) for path in paths.split(",")],
                    process=_history_for(status),
                )
            )
        self._repo.import_complaints(complaints)

    def increase_total_likes(self, complaint_id: str) -> None:
        self._repo.increase_total_likes(complaint_id)

    def decrease_total_likes(self, complaint_id: str) -> None:
        self._repo.decrease_total_likes(complaint_id)

    def get_complaint_ids_by_user_id(self, user_id: int) -> list[str]:
        return self._repo.get_complaint_ids_by_user_id(user_id)