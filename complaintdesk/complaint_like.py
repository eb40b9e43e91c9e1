"""Use cases for liking complaints."""

from __future__ import annotations

import dataclasses

from complaintdesk.entities import ComplaintLike


class ComplaintLikeUseCase:
    """Toggles a user's like on a complaint."""

    def __init__(self, repo) -> None:
        self._repo = repo

    def toggle_like(self, complaint_like: ComplaintLike) -> str:
        """Like the complaint, or remove an existing like.

        Returns ``"liked"`` or ``"unliked"``. When a like is removed,
        ``complaint_like`` is filled in with the stored record.
        """
        existing = self._repo.find_by_user_and_complaint(
            complaint_like.user_id, complaint_like.complaint_id
        )
        if existing is None:
            self._repo.likes(complaint_like)
            return "liked"

        self._repo.unlike(existing)
        for item in dataclasses.fields(existing):
            setattr(complaint_like, item.name, getattr(existing, item.name))
        return "unliked"