from unittest.mock import Mock

import pytest

from complaintdesk.complaint_file import ComplaintFileUseCase
from complaintdesk.entities import ComplaintFile


def test_create_success():
    repo, storage = Mock(), Mock()
    storage.upload.return_value = ["path"]
    files = []
    result = ComplaintFileUseCase(repo, storage).create(files, "complaint_id")
    assert result == [ComplaintFile(complaint_id="complaint_id", path="path")]
    storage.upload.assert_called_once_with(files)
    repo.create.assert_called_once_with(result)


def test_create_keeps_upload_order():
    repo, storage = Mock(), Mock()
    storage.upload.return_value = ["a.jpg", "b.jpg"]
    result = ComplaintFileUseCase(repo, storage).create([object(), object()], "C-1")
    assert [f.path for f in result] == ["a.jpg", "b.jpg"]
    assert {f.complaint_id for f in result} == {"C-1"}


def test_create_upload_failure():
    repo, storage = Mock(), Mock()
    storage.upload.side_effect = RuntimeError("failed to upload")
    with pytest.raises(RuntimeError, match="failed to upload"):
        ComplaintFileUseCase(repo, storage).create([], "complaint_id")
    repo.create.assert_not_called()


def test_create_repository_failure():
    repo, storage = Mock(), Mock()
    storage.upload.return_value = ["path"]
    repo.create.side_effect = RuntimeError("failed to create")
    with pytest.raises(RuntimeError, match="failed to create"):
        ComplaintFileUseCase(repo, storage).create([], "complaint_id")


def test_delete_by_complaint_id_success():
    repo, storage = Mock(), Mock()
    assert ComplaintFileUseCase(repo, storage).delete_by_complaint_id("complaint_id") is None
    repo.delete_by_complaint_id.assert_called_once_with("complaint_id")


def test_delete_by_complaint_id_failure():
    repo, storage = Mock(), Mock()
    repo.delete_by_complaint_id.side_effect = RuntimeError("failed to delete")
    with pytest.raises(RuntimeError, match="failed to delete"):
        ComplaintFileUseCase(repo, storage).delete_by_complaint_id("complaint_id")