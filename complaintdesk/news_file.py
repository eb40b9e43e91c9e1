"""Use cases for files attached to news articles."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from complaintdesk.entities import NewsFile


class NewsFileUseCase:
    """Uploads news attachments to storage and records where they live."""

    def __init__(self, repository, storage) -> None:
        self._repo = repository
        self._storage = storage

    def create(self, files: Sequence[Any], news_id: int) -> list[NewsFile]:
        paths = self._storage.upload(files)
        news_files = [NewsFile(news_id=news_id, path=path) for path in paths]
        self._repo.create(news_files)
        return news_files

    def delete_by_news_id(self, news_id: int) -> None:
        self._repo.delete_by_news_id(news_id)