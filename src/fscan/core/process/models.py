"""Process information model for the memory listing."""

from __future__ import annotations

from typing import override

from pydantic import BaseModel, ConfigDict, Field, field_validator

_BYTES_PER_MB = 1024 * 1024


class ProcessInfo(BaseModel):
    """Information about a running process and its resident memory."""

    pid: int = Field(..., ge=0, description="Process ID")
    name: str = Field(..., description="Process name")
    memory_bytes: int = Field(default=0, ge=0, description="Resident set size in bytes")

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not empty."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v

    @property
    def memory_mb(self) -> float:
        """Resident memory in megabytes (1024-based)."""
        return self.memory_bytes / _BYTES_PER_MB

    @override
    def __str__(self) -> str:
        return f"ProcessInfo(pid={self.pid}, name='{self.name}', memory_mb={self.memory_mb:.2f})"
