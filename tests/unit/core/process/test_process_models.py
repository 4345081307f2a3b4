"""Test suite for the process information model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fscan.core.process.models import ProcessInfo


class TestProcessInfo:
    """Test the ProcessInfo model."""

    def test_valid_process_info(self) -> None:
        info = ProcessInfo(pid=42, name="python", memory_bytes=3 * 1024 * 1024)

        assert info.pid == 42
        assert info.name == "python"
        assert info.memory_mb == 3.0

    def test_memory_defaults_to_zero(self) -> None:
        assert ProcessInfo(pid=1, name="init").memory_bytes == 0

    def test_pid_zero_allowed(self) -> None:
        assert ProcessInfo(pid=0, name="kernel_task").pid == 0

    @pytest.mark.parametrize("pid", [-1, -100])
    def test_negative_pid_rejected(self, pid: int) -> None:
        with pytest.raises(ValidationError):
            _ = ProcessInfo(pid=pid, name="bad")

    def test_negative_memory_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _ = ProcessInfo(pid=1, name="bad", memory_bytes=-1)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError, match="Name cannot be empty"):
            _ = ProcessInfo(pid=1, name=name)

    def test_is_frozen(self) -> None:
        info = ProcessInfo(pid=1, name="init")

        with pytest.raises(ValidationError):
            info.pid = 2  # pyright: ignore[reportAttributeAccessIssue]

    def test_str(self) -> None:
        info = ProcessInfo(pid=7, name="db", memory_bytes=1024 * 1024 // 2)

        assert str(info) == "ProcessInfo(pid=7, name='db', memory_mb=0.50)"
