"""Read-only snapshot models describing locator state."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SystemInfo(BaseModel):
    """Snapshot of one declared capability and what currently answers for it."""

    name: str = Field(..., description="Qualified name of the capability")
    module: str | None = Field(default=None, description="Module defining the capability")
    qualname: str = Field(..., description="Qualified name within its module")
    required: bool = Field(default=False, description="Absence is reported")
    no_override: bool = Field(default=False, description="Ignored by override layers")
    create_if_not_present: bool = Field(
        default=False, description="Synthesized during discovery when missing"
    )
    has_null_instance: bool = Field(default=False, description="A fallback is configured")
    bound_count: int = Field(default=0, description="Number of stacked bindings")
    instance_type: str | None = Field(
        default=None, description="Type name of the instance answering lookups"
    )

    @property
    def is_resolved(self) -> bool:
        """Return True when a lookup would yield something."""
        return self.instance_type is not None


__all__ = ["SystemInfo"]
