from pathlib import Path

import pytest

from enumgen.pipeline import NoEntriesError, generate_file, request_for_comment, request_for_field

ORDER_SOURCE = """package com.example.order;

public class OrderDTO {
    /**
     * 0-Pending, 1-Paid, 1-duplicate
     */
    private Integer payStatus;

    /** free text only */
    private String note;
}
"""


def _write_source(tmp_path: Path) -> Path:
    path = tmp_path / "OrderDTO.java"
    path.write_text(ORDER_SOURCE, encoding="utf-8")
    return path


def test_request_for_field_derives_names(tmp_path: Path):
    request = request_for_field(_write_source(tmp_path), "payStatus")
    assert request.namespace == "com.example.order"
    assert request.type_name == "OrderPayStatusEnum"
    assert [e.name for e in request.entries] == ["PENDING", "PAID"]


def test_generate_file_writes_next_to_source(tmp_path: Path):
    request = request_for_field(_write_source(tmp_path), "payStatus")
    path = generate_file(request, tmp_path)
    assert path == tmp_path / "OrderPayStatusEnum.java"
    text = path.read_text(encoding="utf-8")
    assert text.startswith("package com.example.order;")
    assert "PAID(1, \"Paid\")" in text

    with pytest.raises(FileExistsError):
        generate_file(request, tmp_path)


def test_generate_file_rejects_empty_requests(tmp_path: Path):
    request = request_for_field(_write_source(tmp_path), "note")
    assert request.entries == []
    with pytest.raises(NoEntriesError):
        generate_file(request, tmp_path)
    assert not (tmp_path / "OrderNoteEnum.java").exists()


def test_request_for_field_missing_field(tmp_path: Path):
    with pytest.raises(LookupError):
        request_for_field(_write_source(tmp_path), "missing")


def test_request_for_comment_keeps_caller_names():
    request = request_for_comment("1-on, 2-off", "SwitchEnum", "com.example")
    assert request.type_name == "SwitchEnum"
    assert request.namespace == "com.example"
    assert len(request.entries) == 2
