"""Use cases for comments on news articles."""

from __future__ import annotations

from complaintdesk.entities import NewsComment
from complaintdesk.errors import CommentCannotBeEmptyError


class NewsCommentUseCase:
    """Posts, reads, changes and removes news comments."""

    def __init__(self, repo) -> None:
        self._repo = repo

    def comment_news(self, news_comment: NewsComment) -> None:
        # The comment is handed to the repository before it is checked; an
        # empty comment is reported in preference to a storage failure.
        failure: Exception | None = None
        try:
            self._repo.comment_news(news_comment)
        except Exception as exc:
            failure = exc
        if not news_comment.comment:
            raise CommentCannotBeEmptyError() from failure
        if failure is not None:
            raise failure

    def get_by_id(self, comment_id: int) -> NewsComment:
        return self._repo.get_by_id(comment_id)

    def get_by_news_id(self, news_id: int) -> list[NewsComment]:
        return self._repo.get_by_news_id(news_id)

    def update_comment(self, news_comment: NewsComment) -> None:
        self._repo.update_comment(news_comment)

    def delete_comment(self, comment_id: int) -> None:
        self._repo.delete_comment(comment_id)