"""Use cases for the processing history of a complaint."""

from __future__ import annotations

from complaintdesk.entities import ComplaintProcess, ComplaintStatus
from complaintdesk.errors import (
    AllFieldsMustBeFilledError,
    ComplaintAlreadyFinishedError,
    ComplaintAlreadyOnProgressError,
    ComplaintAlreadyRejectedError,
    ComplaintAlreadyVerifiedError,
    ComplaintNotFoundError,
    ComplaintNotOnProgressError,
    ComplaintNotVerifiedError,
    InternalServerError,
    InvalidIDFormatError,
    InvalidStatusError,
    ServiceError,
)

_PENDING = ComplaintStatus.PENDING.value
_VERIFIED = ComplaintStatus.VERIFIED.value
_ON_PROGRESS = ComplaintStatus.ON_PROGRESS.value
_FINISHED = ComplaintStatus.FINISHED.value
_REJECTED = ComplaintStatus.REJECTED.value

_COMPLAINT_REFERENCE = "REFERENCES `complaints` (`id`)"

# (requested status, current status) -> error raised for that move.
_FORBIDDEN_MOVES: dict[tuple[str, str], type[ServiceError]] = {
    (_PENDING, _ON_PROGRESS): ComplaintNotVerifiedError,
    (_PENDING, _FINISHED): ComplaintNotVerifiedError,
    (_VERIFIED, _VERIFIED): ComplaintAlreadyVerifiedError,
    (_VERIFIED, _REJECTED): ComplaintAlreadyRejectedError,
    (_VERIFIED, _FINISHED): ComplaintAlreadyFinishedError,
    (_VERIFIED, _ON_PROGRESS): ComplaintAlreadyOnProgressError,
    (_ON_PROGRESS, _ON_PROGRESS): ComplaintAlreadyOnProgressError,
    (_ON_PROGRESS, _REJECTED): ComplaintAlreadyRejectedError,
    (_ON_PROGRESS, _FINISHED): ComplaintAlreadyFinishedError,
    (_ON_PROGRESS, _PENDING): ComplaintNotVerifiedError,
    (_FINISHED, _FINISHED): ComplaintAlreadyFinishedError,
    (_FINISHED, _REJECTED): ComplaintAlreadyRejectedError,
    (_FINISHED, _PENDING): ComplaintNotVerifiedError,
    (_FINISHED, _VERIFIED): ComplaintNotOnProgressError,
    (_REJECTED, _REJECTED): ComplaintAlreadyRejectedError,
    (_REJECTED, _FINISHED): ComplaintAlreadyFinishedError,
    (_REJECTED, _VERIFIED): ComplaintAlreadyVerifiedError,
    (_REJECTED, _ON_PROGRESS): ComplaintAlreadyOnProgressError,
}

# Status a complaint falls back to once the step with the given status is removed.
_PREVIOUS_STATUS = {
    _VERIFIED: _PENDING,
    _ON_PROGRESS: _VERIFIED,
    _FINISHED: _ON_PROGRESS,
    _REJECTED: _PENDING,
}


class ComplaintProcessUseCase:
    """Business rules for adding, changing and removing processing steps."""

    def __init__(self, repository, complaint_repository) -> None:
        self._repo = repository
        self._complaint_repo = complaint_repository

    def create(self, complaint_process: ComplaintProcess) -> ComplaintProcess:
        if not complaint_process.message or not complaint_process.status:
            raise AllFieldsMustBeFilledError()
        if complaint_process.status not in ComplaintStatus.values():
            raise InvalidStatusError()

        try:
            current = self._complaint_repo.get_status(complaint_process.complaint_id)
        except Exception as exc:
            raise InternalServerError() from exc

        forbidden = _FORBIDDEN_MOVES.get((complaint_process.status, current))
        if forbidden is not None:
            raise forbidden()

        try:
            self._repo.create(complaint_process)
        except Exception as exc:
            if _COMPLAINT_REFERENCE in str(exc):
                raise ComplaintNotFoundError() from exc
            raise InternalServerError() from exc
        return complaint_process

    def get_by_complaint_id(self, complaint_id: str) -> list[ComplaintProcess]:
        return self._repo.get_by_complaint_id(complaint_id)

    def update(self, complaint_process: ComplaintProcess) -> ComplaintProcess:
        if not complaint_process.message:
            raise AllFieldsMustBeFilledError()
        self._repo.update(complaint_process)
        return complaint_process

    def delete(self, complaint_id: str, complaint_process_id: int) -> str:
        """Remove a step and return the status the complaint goes back to."""
        if not complaint_id or not complaint_process_id:
            raise InvalidIDFormatError()
        status = self._repo.delete(complaint_id, complaint_process_id)
        return _PREVIOUS_STATUS.get(status, status)