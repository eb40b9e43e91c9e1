import pytest

from complaintdesk.entities import Metadata, News
from complaintdesk.errors import (
    AllFieldsMustBeFilledError,
    CategoryNotFoundError,
    InternalServerError,
    LimitMustBeFilledError,
    PageMustBeFilledError,
)
from complaintdesk.news import NewsUseCase

FK_ERROR = (
    "foreign key constraint fails (`e-complaint-api`.`news`, CONSTRAINT `news_ibfk_1` "
    "FOREIGN KEY (`category_id`) REFERENCES `categories` (`id`))"
)


class FakeNewsRepo:
    def __init__(self, **results):
        self.results = results
        self.calls = []

    def _respond(self, name, *args):
        self.calls.append((name, args))
        result = self.results.get(name)
        if isinstance(result, Exception):
            raise result
        return result

    def get_paginated(self, *args):
        return self._respond("get_paginated", *args)

    def get_metadata(self, *args):
        return self._respond("get_metadata", *args)

    def get_by_id(self, news_id):
        return self._respond("get_by_id", news_id)

    def create(self, news):
        return self._respond("create", news)

    def update(self, news):
        return self._respond("update", news)

    def delete(self, news_id):
        return self._respond("delete", news_id)


def test_get_paginated_success():
    news = [
        News(id=1, title="title", content="content", category_id=1),
        News(id=2, title="title2", content="content2"),
        News(id=3, title="title3", content="content3"),
    ]
    repo = FakeNewsRepo(get_paginated=news)
    assert NewsUseCase(repo).get_paginated(10, 1, "", {}, "created_at", "DESC") == news
    assert repo.calls == [("get_paginated", (10, 1, "", {}, "created_at", "DESC"))]


@pytest.mark.parametrize(
    "sort_by,sort_type", [("", "DESC"), ("created_at", ""), ("", "")]
)
def test_get_paginated_defaults(sort_by, sort_type):
    repo = FakeNewsRepo(get_paginated=[])
    assert NewsUseCase(repo).get_paginated(10, 1, "", {}, sort_by, sort_type) == []
    assert repo.calls == [("get_paginated", (10, 1, "", {}, "created_at", "DESC"))]


def test_get_paginated_page_must_be_filled():
    repo = FakeNewsRepo()
    with pytest.raises(PageMustBeFilledError):
        NewsUseCase(repo).get_paginated(10, 0, "", {}, "created_at", "DESC")
    assert repo.calls == []


def test_get_paginated_limit_must_be_filled():
    repo = FakeNewsRepo()
    with pytest.raises(LimitMustBeFilledError):
        NewsUseCase(repo).get_paginated(0, 1, "", {}, "created_at", "DESC")
    assert repo.calls == []


@pytest.mark.parametrize(
    "error,sort_type",
    [(InternalServerError(), "DESC"), (ValueError("invalid sort type"), "INVALID")],
)
def test_get_paginated_repo_error(error, sort_type):
    repo = FakeNewsRepo(get_paginated=error)
    with pytest.raises(InternalServerError):
        NewsUseCase(repo).get_paginated(10, 1, "", {}, "created_at", sort_type)


def test_create_success():
    news = News(title="title", content="content", category_id=1)
    repo = FakeNewsRepo()
    assert NewsUseCase(repo).create(news) is news
    assert repo.calls == [("create", (news,))]


def test_create_repo_error():
    repo = FakeNewsRepo(create=InternalServerError())
    with pytest.raises(InternalServerError):
        NewsUseCase(repo).create(News(title="title", content="content", category_id=1))


@pytest.mark.parametrize(
    "news",
    [
        News(title="", content="content", category_id=1),
        News(title="title", content="", category_id=1),
        News(title="title", content="content", category_id=0),
    ],
)
def test_create_missing_fields(news):
    repo = FakeNewsRepo()
    with pytest.raises(AllFieldsMustBeFilledError):
        NewsUseCase(repo).create(news)
    assert repo.calls == []


def test_create_category_not_found():
    repo = FakeNewsRepo(create=RuntimeError(FK_ERROR))
    with pytest.raises(CategoryNotFoundError):
        NewsUseCase(repo).create(News(title="title", content="content", category_id=999))


def test_get_by_id_success():
    news = News(id=1, title="title", content="content", category_id=1)
    repo = FakeNewsRepo(get_by_id=news)
    assert NewsUseCase(repo).get_by_id(1) == news


def test_get_by_id_error():
    repo = FakeNewsRepo(get_by_id=InternalServerError())
    with pytest.raises(InternalServerError):
        NewsUseCase(repo).get_by_id(1)


def test_delete_success():
    repo = FakeNewsRepo()
    NewsUseCase(repo).delete(1)
    assert repo.calls == [("delete", (1,))]


def test_delete_error():
    repo = FakeNewsRepo(delete=InternalServerError())
    with pytest.raises(InternalServerError):
        NewsUseCase(repo).delete(1)


def test_update_success():
    news = News(id=1, title="title", content="content", category_id=1)
    repo = FakeNewsRepo(update=news)
    assert NewsUseCase(repo).update(news) == news


def test_update_error_passes_through():
    repo = FakeNewsRepo(update=InternalServerError())
    with pytest.raises(InternalServerError):
        NewsUseCase(repo).update(News(id=1, title="title", content="content", category_id=1))


@pytest.mark.parametrize(
    "news",
    [
        News(id=1, title="", content="content", category_id=1),
        News(id=1, title="title", content="", category_id=1),
        News(id=1, title="title", content="content", category_id=0),
    ],
)
def test_update_missing_fields(news):
    repo = FakeNewsRepo()
    with pytest.raises(AllFieldsMustBeFilledError):
        NewsUseCase(repo).update(news)
    assert repo.calls == []


def test_update_category_not_found():
    repo = FakeNewsRepo(update=RuntimeError(FK_ERROR))
    with pytest.raises(CategoryNotFoundError):
        NewsUseCase(repo).update(News(id=1, title="title", content="content", category_id=999))


def test_metadata_with_limit_and_page():
    repo = FakeNewsRepo(get_metadata=Metadata(total_data=100))
    pagination = NewsUseCase(repo).get_metadata(10, 1, "", {}).pagination
    assert pagination.first_page == 1
    assert pagination.last_page == 10
    assert pagination.current_page == 1
    assert pagination.total_data_per_page == 10
    assert pagination.prev_page == 0
    assert pagination.next_page == 2


def test_metadata_without_limit_and_page():
    repo = FakeNewsRepo(get_metadata=Metadata(total_data=100))
    metadata = NewsUseCase(repo).get_metadata(0, 0, "", {})
    pagination = metadata.pagination
    assert metadata.total_data == 100
    assert pagination.first_page == 1
    assert pagination.last_page == 1
    assert pagination.current_page == 1
    assert pagination.total_data_per_page == 100
    assert pagination.prev_page == 0
    assert pagination.next_page == 0


def test_metadata_last_page():
    repo = FakeNewsRepo(get_metadata=Metadata(total_data=100))
    pagination = NewsUseCase(repo).get_metadata(10, 10, "", {}).pagination
    assert pagination.total_data_per_page == 10
    assert pagination.next_page == 0


def test_metadata_page_greater_than_one():
    repo = FakeNewsRepo(get_metadata=Metadata(total_data=100))
    assert NewsUseCase(repo).get_metadata(10, 2, "", {}).pagination.prev_page == 1


def test_metadata_error():
    repo = FakeNewsRepo(get_metadata=RuntimeError("internal server error"))
    with pytest.raises(InternalServerError):
        NewsUseCase(repo).get_metadata(10, 1, "", {})