"""Errors raised by the service layer."""


class ServiceError(Exception):
    """Base class of every error the service layer reports."""

    default_message = "service error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class InternalServerError(ServiceError):
    default_message = "internal server error"


class PageMustBeFilledError(ServiceError):
    default_message = "page must be filled when limit is filled"


class LimitMustBeFilledError(ServiceError):
    default_message = "limit must be filled when page is filled"


class AllFieldsMustBeFilledError(ServiceError):
    default_message = "all fields must be filled"


class RegencyNotFoundError(ServiceError):
    default_message = "regency not found"


class CategoryNotFoundError(ServiceError):
    default_message = "category not found"


class InvalidStatusError(ServiceError):
    default_message = "invalid status"


class IDMustBeFilledError(ServiceError):
    default_message = "id must be filled"


class ColumnsDoesntMatchError(ServiceError):
    default_message = "columns doesn't match"


class InvalidIDFormatError(ServiceError):
    default_message = "invalid id format"


class InvalidCategoryIDFormatError(ServiceError):
    default_message = "invalid category id format"


class ComplaintNotVerifiedError(ServiceError):
    default_message = "complaint not verified"


class ComplaintAlreadyVerifiedError(ServiceError):
    default_message = "complaint already verified"


class ComplaintAlreadyRejectedError(ServiceError):
    default_message = "complaint already rejected"


class ComplaintAlreadyFinishedError(ServiceError):
    default_message = "complaint already finished"


class ComplaintAlreadyOnProgressError(ServiceError):
    default_message = "complaint already on progress"


class ComplaintNotOnProgressError(ServiceError):
    default_message = "complaint not on progress"


class ComplaintNotFoundError(ServiceError):
    default_message = "complaint not found"


class ComplaintProcessNotFoundError(ServiceError):
    default_message = "complaint process not found"


class CommentCannotBeEmptyError(ServiceError):
    default_message = "comment cannot be empty"


class DiscussionNotFoundError(ServiceError):
    default_message = "discussion not found"