import logging
from pathlib import Path

import pytest

from dirsize.adapters.filesystem.local_fs import LocalFS
from dirsize.domain.errors import TraversalError
from dirsize.domain.models import EntryType
from dirsize.services.listing_service import ListingService
from tests.fixtures.fake_fs import FlakyFS, write_file


def test_lists_only_immediate_children(tmp_path: Path):
    write_file(tmp_path / "a.txt", 5)
    write_file(tmp_path / "sub" / "nested.txt", 500)

    entries = ListingService(LocalFS()).list_entries(str(tmp_path))

    assert [(e.name, e.type, e.size) for e in entries] == [
        ("a.txt", EntryType.FILE, 5),
        ("sub", EntryType.DIRECTORY, 0),
    ]
    assert entries[1].path == str(tmp_path / "sub")


def test_hidden_entries_skipped_by_default(tmp_path: Path):
    write_file(tmp_path / ".hidden", 1)
    write_file(tmp_path / "shown", 1)

    default = ListingService(LocalFS()).list_entries(str(tmp_path))
    everything = ListingService(LocalFS(), include_hidden=True).list_entries(str(tmp_path))

    assert [e.name for e in default] == ["shown"]
    assert [e.name for e in everything] == [".hidden", "shown"]


def test_stat_failure_skips_entry(tmp_path: Path):
    write_file(tmp_path / "ok.txt", 3)
    bad = write_file(tmp_path / "bad.txt", 4)

    entries = ListingService(FlakyFS(fail_stat=[bad])).list_entries(str(tmp_path))

    assert [e.name for e in entries] == ["ok.txt"]


def test_unreadable_root_raises(tmp_path: Path):
    with pytest.raises(TraversalError):
        ListingService(FlakyFS(fail_list=[tmp_path])).list_entries(str(tmp_path))


def test_empty_root(tmp_path: Path):
    assert ListingService(LocalFS()).list_entries(str(tmp_path)) == []


def test_stat_failure_logs_warning(tmp_path: Path, caplog):
    write_file(tmp_path / "ok.txt", 3)
    bad = write_file(tmp_path / "bad.txt", 4)

    with caplog.at_level(logging.WARNING):
        ListingService(FlakyFS(fail_stat=[bad])).list_entries(str(tmp_path))

    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("ListingService: stat failed" in m and str(bad) in m for m in messages)
