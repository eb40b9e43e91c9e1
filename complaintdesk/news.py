"""Use cases for news articles."""

from __future__ import annotations

import dataclasses

from complaintdesk.entities import Metadata, News, Pagination
from complaintdesk.errors import (
    AllFieldsMustBeFilledError,
    CategoryNotFoundError,
    InternalServerError,
    LimitMustBeFilledError,
    PageMustBeFilledError,
)

_CATEGORY_REFERENCE = "REFERENCES `categories` (`id`))"


def _news_pagination(limit: int, page: int, total_data: int) -> Pagination:
    if not (limit and page):
        return Pagination(
            first_page=1,
            last_page=1,
            current_page=1,
            total_data_per_page=total_data,
        )
    last_page = (total_data + limit - 1) // limit
    if page == last_page:
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


def _is_complete(news: News) -> bool:
    return bool(news.title and news.content and news.category_id)


class NewsUseCase:
    """Business rules for publishing and reading news."""

    def __init__(self, repository) -> None:
        self._repo = repository

    def get_paginated(
        self,
        limit: int,
        page: int,
        search: str,
        filter: dict,
        sort_by: str = "",
        sort_type: str = "",
    ) -> list[News]:
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
            metadata, pagination=_news_pagination(limit, page, metadata.total_data)
        )

    def get_by_id(self, news_id: int) -> News:
        return self._repo.get_by_id(news_id)

    def create(self, news: News) -> News:
        if not _is_complete(news):
            raise AllFieldsMustBeFilledError()
        try:
            self._repo.create(news)
        except Exception as exc:
            if str(exc).endswith(_CATEGORY_REFERENCE):
                raise CategoryNotFoundError() from exc
            raise InternalServerError() from exc
        return news

    def delete(self, news_id: int) -> None:
        self._repo.delete(news_id)

    def update(self, news: News) -> News:
        if not _is_complete(news):
            raise AllFieldsMustBeFilledError()
        try:
            return self._repo.update(news)
        except Exception as exc:
            if str(exc).endswith(_CATEGORY_REFERENCE):
                raise CategoryNotFoundError() from exc
            raise