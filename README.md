# complaintdesk

The business rules of a public complaint and news service, written as plain
Python use-case classes. Each use case takes collaborator objects (repositories,
a file storage, a chat client) that you supply. The use cases do the
validation, the pagination arithmetic, the complaint status workflow and the
mapping of storage failures to service errors.

The package has no runtime dependencies.

## Install

```
pip install complaintdesk
```

To run the test suite:

```
pip install "complaintdesk[test]"
pytest
```

## Modules

- `complaintdesk.entities` holds the dataclasses `Complaint`, `ComplaintProcess`,
  `ComplaintFile`, `ComplaintActivity`, `ComplaintLike`, `Discussion`, `Faq`,
  `News`, `NewsFile`, `NewsComment`, `NewsLike`, `Regency`, `MonthData`,
  `Pagination` and `Metadata`. It also holds:
  - the `ComplaintStatus` enum (`Pending`, `Verifikasi`, `On Progress`,
    `Selesai`, `Ditolak`);
  - `generate_id(prefix, length)`, which returns the prefix followed by random
    lower-case letters and digits;
  - `Complaint.is_complete()`.
- `complaintdesk.errors` holds the exceptions. All of them derive from
  `ServiceError`. Examples are `AllFieldsMustBeFilledError`,
  `InvalidStatusError`, `ComplaintAlreadyVerifiedError`, `CategoryNotFoundError`
  and `InternalServerError`.
- `complaintdesk.complaint` has `ComplaintUseCase` for complaints, including
  spreadsheet import. It also has `build_pagination(limit, page, total_data)`.
- `complaintdesk.complaint_process` has `ComplaintProcessUseCase`, which drives
  the status workflow.
- `complaintdesk.complaint_activity` has `ComplaintActivityUseCase`.
- `complaintdesk.complaint_file` has `ComplaintFileUseCase`.
- `complaintdesk.complaint_like` has `ComplaintLikeUseCase`.
- `complaintdesk.news` has `NewsUseCase`.
- `complaintdesk.news_comment` has `NewsCommentUseCase`.
- `complaintdesk.news_file` has `NewsFileUseCase`.
- `complaintdesk.news_like` has `NewsLikeUseCase`.
- `complaintdesk.discussion` has `DiscussionUseCase`.
- `complaintdesk.dashboard` has `DashboardUseCase`.
- `complaintdesk.regency` has `RegencyUseCase`.

## Example

```python
from complaintdesk.complaint import ComplaintUseCase
from complaintdesk.entities import Metadata
from complaintdesk.errors import PageMustBeFilledError


class MemoryComplaints:
    def __init__(self):
        self.items = []

    def get_metadata(self, limit, page, search, filter):
        return Metadata(total_data=len(self.items))


use_case = ComplaintUseCase(MemoryComplaints(), None, rows_reader=lambda file: [])

meta = use_case.get_metadata(10, 1, "", {})
print(meta.pagination.last_page)   # 1 when there is no data

try:
    use_case.get_paginated(10, 0, "", {}, "", "")
except PageMustBeFilledError:
    print("a page number is required when a limit is given")
```

## Behaviour worth knowing

- **Pagination.** `get_paginated` raises `PageMustBeFilledError` or
  `LimitMustBeFilledError` when only one of `limit` and `page` is given. An
  empty `sort_by` defaults to `created_at` and an empty `sort_type` defaults to
  `DESC`. Any repository failure becomes `InternalServerError`. When `limit`
  and `page` are both zero, `get_metadata` reports a single page holding all
  the data.
- **Empty totals.** For complaints, a total of zero gives `last_page` 1. For
  news, it gives `last_page` 0.
- **Referential errors.** When creating or updating complaints and news,
  repository errors whose message ends in a foreign-key reference to
  `regencies` or `categories` become `RegencyNotFoundError` or
  `CategoryNotFoundError`.
- **Import.** `ComplaintUseCase.import_file` reads its rows through the
  `rows_reader` callable. The first row is a header. Each later row needs nine
  columns:
  1. user id
  2. category id
  3. regency id
  4. address
  5. description
  6. status
  7. type
  8. date as `DD-MM-YYYY`
  9. comma-separated file paths

  For each row the importer also fills in the processing history that leads to
  that row's status.
- **Status workflow.** `ComplaintProcessUseCase.create` rejects a step that
  does not fit the complaint's current status, with a specific error such as
  `ComplaintNotVerifiedError` or `ComplaintAlreadyFinishedError`.
  `ComplaintProcessUseCase.delete` removes the given step and returns the
  status the complaint falls back to. For example, `Selesai` falls back to
  `On Progress`.
- **Likes.** `toggle_like` returns `"liked"` or `"unliked"`. For news, a failed
  lookup of an existing like is treated as no like.
- **Answer recommendations.** `DiscussionUseCase.get_answer_recommendation`
  builds a prompt from the FAQ list and the complaint's discussion. It passes
  the prompt to `chat_api.get_chat_completion(prompt, "")` and returns the
  reply.

## What the package does not do

The package contains only the rules. It has none of the following, and you
supply them as the collaborator objects:

- database storage;
- an HTTP server or routes;
- a spreadsheet reader;
- a file storage uploader;
- a chat-completion client;
- a command-line program.