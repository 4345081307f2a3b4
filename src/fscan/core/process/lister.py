"""Process listing backed by psutil."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import override

import psutil

from .models import ProcessInfo

logger = logging.getLogger(__name__)

# Shown when psutil cannot resolve a process name
UNKNOWN_PROCESS_NAME = "<unknown>"


class ProcessLister(ABC):
    """Abstract source of process records for the memory listing."""

    @abstractmethod
    def list_processes(self) -> list[ProcessInfo]:
        """List all processes accessible to the lister.

        Returns:
            ProcessInfo objects sorted by memory usage, largest first
        """
        pass


class PsutilProcessLister(ProcessLister):
    """ProcessLister reading the system process table through psutil."""

    @override
    def list_processes(self) -> list[ProcessInfo]:
        processes: list[ProcessInfo] = []

        # psutil.process_iter returns Iterator[Process] but type checker sees it as partially unknown
        for proc in psutil.process_iter(["pid", "name", "memory_info"]):  # pyright: ignore[reportUnknownMemberType]
            try:
                info = self._create_process_info(proc)
            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess) as e:
                logger.debug("Skipping process %s: %s", proc.pid, e)
                continue
            processes.append(info)

        processes.sort(key=lambda p: p.memory_bytes, reverse=True)
        logger.debug("Listed %d processes", len(processes))
        return processes

    @staticmethod
    def _create_process_info(proc: psutil.Process) -> ProcessInfo:
        """Create ProcessInfo from a psutil process with prefetched info.

        Args:
            proc: Process yielded by psutil.process_iter

        Returns:
            ProcessInfo; unreadable memory is reported as 0
        """
        info: dict[str, object] = proc.info  # pyright: ignore[reportAttributeAccessIssue, reportUnknownMemberType]
        name = info.get("name")
        memory_info = info.get("memory_info")
        rss = getattr(memory_info, "rss", 0) if memory_info is not None else 0

        return ProcessInfo(
            pid=int(info.get("pid", proc.pid)),  # pyright: ignore[reportArgumentType]
            name=name if isinstance(name, str) and name.strip() else UNKNOWN_PROCESS_NAME,
            memory_bytes=int(rss),
        )
