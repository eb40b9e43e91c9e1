"""Domain records shared by the service layer."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(prefix: str, length: int) -> str:
    """Return ``prefix`` followed by ``length`` random lower-case letters and digits."""
    if length < 0:
        raise ValueError("length must not be negative")
    return prefix + "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


class ComplaintStatus(str, Enum):
    """The stages a complaint moves through."""

    PENDING = "Pending"
    VERIFIED = "Verifikasi"
    ON_PROGRESS = "On Progress"
    FINISHED = "Selesai"
    REJECTED = "Ditolak"

    @classmethod
    def values(cls) -> frozenset[str]:
        return frozenset(member.value for member in cls)


@dataclass
class Pagination:
    first_page: int = 0
    last_page: int = 0
    current_page: int = 0
    total_data_per_page: int = 0
    prev_page: int = 0
    next_page: int = 0


@dataclass
class Metadata:
    total_data: int = 0
    pagination: Pagination = field(default_factory=Pagination)


@dataclass
class ComplaintFile:
    id: int = 0
    complaint_id: str = ""
    path: str = ""


@dataclass
class ComplaintProcess:
    id: int = 0
    complaint_id: str = ""
    admin_id: int = 0
    status: str = ""
    message: str = ""


@dataclass
class Complaint:
    id: str = ""
    user_id: int = 0
    category_id: int = 0
    regency_id: str = ""
    address: str = ""
    description: str = ""
    status: str = ""
    type: str = ""
    date: datetime | None = None
    total_likes: int = 0
    files: list[ComplaintFile] = field(default_factory=list)
    process: list[ComplaintProcess] = field(default_factory=list)

    def is_complete(self) -> bool:
        """Whether every field a user must supply is filled in."""
        return bool(
            self.category_id
            and self.user_id
            and self.regency_id
            and self.description
            and self.address
            and self.type
            and self.date is not None
        )


@dataclass
class ComplaintActivity:
    id: int = 0
    complaint_id: str = ""
    like_id: int | None = None
    discussion_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class ComplaintLike:
    id: int = 0
    user_id: int = 0
    complaint_id: str = ""


@dataclass
class Discussion:
    id: int = 0
    user_id: int | None = None
    admin_id: int | None = None
    complaint_id: str = ""
    comment: str = ""


@dataclass
class Faq:
    id: int = 0
    question: str = ""
    answer: str = ""


@dataclass
class NewsFile:
    id: int = 0
    news_id: int = 0
    path: str = ""


@dataclass
class News:
    id: int = 0
    admin_id: int = 0
    category_id: int = 0
    title: str = ""
    content: str = ""
    total_likes: int = 0
    files: list[NewsFile] = field(default_factory=list)


@dataclass
class NewsComment:
    id: int = 0
    user_id: int | None = None
    admin_id: int | None = None
    news_id: int = 0
    comment: str = ""


@dataclass
class NewsLike:
    id: int = 0
    user_id: int = 0
    news_id: int = 0


@dataclass
class Regency:
    id: str = ""
    name: str = ""


@dataclass
class MonthData:
    month: str = ""
    count: int = 0