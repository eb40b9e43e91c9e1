"""Use cases for regencies."""

from __future__ import annotations

from complaintdesk.entities import Regency
from complaintdesk.errors import InternalServerError


class RegencyUseCase:
    """Lists the regencies a complaint can be filed in."""

    def __init__(self, repository) -> None:
        self._repo = repository

    def get_all(self) -> list[Regency]:
        try:
            return self._repo.get_all()
        except Exception as exc:
            raise InternalServerError() from exc