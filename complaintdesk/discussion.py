"""Use cases for discussions on complaints."""

from __future__ import annotations

from collections.abc import Sequence

from complaintdesk.entities import Discussion, Faq
from complaintdesk.errors import CommentCannotBeEmptyError

_INSTRUCTION = (
    "Anda sebagai admin, berikan respon jawaban terhadap diskusi oleh user di atas yang "
    "belum terjawab oleh Admin. Jika ada pertanyaan yang sama atau mirip, jawaban yang "
    "diberikan cukup satu kali saja. Jawaban yang anda berikan disesuaikan dengan FAQ yang "
    "telah disediakan(Menyocokkan pertanyaan pada Q lalu jawab dengan A yang sesuai)."
)


def _faq_section(faqs: Sequence[Faq]) -> str:
    lines = "".join(
        f"{number}.) Q: {faq.question}\nA: {faq.answer}\n\n"
        for number, faq in enumerate(faqs, start=1)
    )
    return "FAQ (Frequently Asked Questions):\n\n" + lines


def _discussion_section(discussions: Sequence[Discussion]) -> str:
    lines = "".join(
        f"{number}.){'User' if item.user_id is not None else 'Admin'}: {item.comment}\n"
        for number, item in enumerate(discussions, start=1)
    )
    return "Diskusi Terkait Aduan User:\n" + lines


class DiscussionUseCase:
    """Manages discussion comments and suggests admin answers."""

    def __init__(self, discussion_repo, faq_repo, chat_api) -> None:
        self._repo = discussion_repo
        self._faq_repo = faq_repo
        self._chat_api = chat_api

    def create(self, discussion: Discussion) -> None:
        if not discussion.comment:
            raise CommentCannotBeEmptyError()
        self._repo.create(discussion)

    def get_by_id(self, discussion_id: int) -> Discussion:
        return self._repo.get_by_id(discussion_id)

    def get_by_complaint_id(self, complaint_id: str) -> list[Discussion] | None:
        return self._repo.get_by_complaint_id(complaint_id)

    def update(self, discussion: Discussion) -> None:
        if not discussion.comment:
            raise CommentCannotBeEmptyError()
        self._repo.update(discussion)

    def delete(self, discussion_id: int) -> None:
        self._repo.delete(discussion_id)

    def get_answer_recommendation(self, complaint_id: str) -> str:
        """Ask the chat model for an admin reply based on the FAQ and the discussion."""
        discussions = self.get_by_complaint_id(complaint_id)
        faqs = self._faq_repo.get_all()

        prompt = [_faq_section(faqs)]
        if discussions is not None:
            prompt.append(_discussion_section(discussions))
        prompt.append(_INSTRUCTION)

        return self._chat_api.get_chat_completion(prompt, "")