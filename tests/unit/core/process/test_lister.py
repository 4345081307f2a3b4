"""Test suite for the psutil-backed process lister."""

from __future__ import annotations

import os
from types import SimpleNamespace
from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from fscan.core.process.lister import UNKNOWN_PROCESS_NAME, ProcessLister, PsutilProcessLister


class MockNoSuchProcess(Exception):
    """Mock exception for psutil.NoSuchProcess."""


class MockAccessDenied(Exception):
    """Mock exception for psutil.AccessDenied."""


class MockZombieProcess(Exception):
    """Mock exception for psutil.ZombieProcess."""


def _setup_mock_psutil(mock_psutil: MagicMock) -> None:
    mock_psutil.NoSuchProcess = MockNoSuchProcess
    mock_psutil.AccessDenied = MockAccessDenied
    mock_psutil.ZombieProcess = MockZombieProcess


def _mock_proc(pid: int, name: str | None, rss: int | None) -> MagicMock:
    proc = MagicMock()
    proc.pid = pid
    proc.info = {
        "pid": pid,
        "name": name,
        "memory_info": SimpleNamespace(rss=rss) if rss is not None else None,
    }
    return proc


class TestProcessLister:
    """Test the abstract ProcessLister interface."""

    def test_cannot_instantiate(self) -> None:
        with pytest.raises(TypeError):
            _ = ProcessLister()  # type: ignore[abstract]


class TestPsutilProcessLister:
    """Test the PsutilProcessLister class."""

    @patch("fscan.core.process.lister.psutil")
    def test_sorted_by_memory_descending(self, mock_psutil: MagicMock) -> None:
        _setup_mock_psutil(mock_psutil)
        mock_psutil.process_iter.return_value = [
            _mock_proc(1, "small", 1024),
            _mock_proc(2, "large", 10 * 1024 * 1024),
            _mock_proc(3, "medium", 2 * 1024 * 1024),
        ]

        processes = PsutilProcessLister().list_processes()

        assert [p.name for p in processes] == ["large", "medium", "small"]
        mock_psutil.process_iter.assert_called_once_with(["pid", "name", "memory_info"])

    @patch("fscan.core.process.lister.psutil")
    def test_missing_name_and_memory(self, mock_psutil: MagicMock) -> None:
        _setup_mock_psutil(mock_psutil)
        mock_psutil.process_iter.return_value = [_mock_proc(9, None, None), _mock_proc(10, "  ", 5)]

        processes = PsutilProcessLister().list_processes()

        assert {p.pid: (p.name, p.memory_bytes) for p in processes} == {
            9: (UNKNOWN_PROCESS_NAME, 0),
            10: (UNKNOWN_PROCESS_NAME, 5),
        }

    @pytest.mark.parametrize("error", [MockNoSuchProcess, MockAccessDenied, MockZombieProcess])
    @patch("fscan.core.process.lister.psutil")
    def test_vanished_or_denied_processes_skipped(
        self, mock_psutil: MagicMock, error: type[Exception]
    ) -> None:
        _setup_mock_psutil(mock_psutil)
        broken = MagicMock()
        broken.pid = 666
        type(broken).info = PropertyMock(side_effect=error("gone"))
        mock_psutil.process_iter.return_value = [broken, _mock_proc(1, "ok", 10)]

        processes = PsutilProcessLister().list_processes()

        assert [p.pid for p in processes] == [1]

    @patch("fscan.core.process.lister.psutil")
    def test_empty_process_table(self, mock_psutil: MagicMock) -> None:
        _setup_mock_psutil(mock_psutil)
        mock_psutil.process_iter.return_value = []

        assert PsutilProcessLister().list_processes() == []

    def test_real_process_table_contains_current_process(self) -> None:
        processes = PsutilProcessLister().list_processes()

        assert any(p.pid == os.getpid() for p in processes)
