"""Use cases for liking news articles."""

from __future__ import annotations

from complaintdesk.entities import NewsLike


class NewsLikeUseCase:
    """Toggles likes on news and keeps the like counters."""

    def __init__(self, repo) -> None:
        self._repo = repo

    def toggle_like(self, news_like: NewsLike) -> str:
        """Like the article, or remove an existing like; returns ``"liked"`` or ``"unliked"``."""
        try:
            existing = self._repo.find_by_user_and_news(news_like.user_id, news_like.news_id)
        except Exception:
            # A failed lookup is treated as "no like recorded yet".
            existing = None

        if existing is None:
            self._repo.likes(news_like)
            return "liked"

        self._repo.unlike(existing)
        return "unliked"

    def increase_total_likes(self, news_id: str) -> None:
        self._repo.increase_total_likes(news_id)

    def decrease_total_likes(self, news_id: str) -> None:
        self._repo.decrease_total_likes(news_id)