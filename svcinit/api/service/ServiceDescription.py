"""Declarative description of the program to run as a service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

OPTION_USER_SERVICE = "user_service"


def has_line_break(value: str) -> bool:
    return "\n" in value or "\r" in value


class ServiceDescription(BaseModel):
    """What to run and how. Built by the caller, never mutated by a backend."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Unique service identifier (file name and control command argument)")
    display_name: str = Field("", description="Human-readable name")
    description: str = Field("", description="Long description, emitted as a comment")
    executable: str = Field(..., description="Absolute path to the program to run")
    arguments: tuple[str, ...] = Field((), description="Arguments passed to the program, in order")
    user_name: str = Field("", description="Run as this user; empty runs as the installing user")
    working_directory: str = Field("", description="Directory to chdir into before exec")
    chroot: str = Field("", description="Directory to chroot into before exec")
    options: dict[str, Any] = Field(default_factory=dict, description="Backend-specific flags")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("description.name is required")
        if "/" in v or any(ch.isspace() for ch in v):
            raise ValueError(f"description.name must not contain '/' or whitespace, got: {v!r}")
        return v

    @field_validator("executable")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        if not v:
            raise ValueError("description.executable is required")
        return v

    # Each of these lands on a single line of the job file
    @field_validator("display_name", "description", "executable", "user_name", "working_directory", "chroot")
    @classmethod
    def validate_single_line(cls, v: str, info: ValidationInfo) -> str:
        if has_line_break(v):
            raise ValueError(f"description.{info.field_name} must not contain line breaks")
        return v

    @field_validator("arguments")
    @classmethod
    def validate_arguments(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for i, arg in enumerate(v):
            if has_line_break(arg):
                raise ValueError(f"description.arguments[{i}] must not contain line breaks")
        return v

    def option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    @property
    def user_service(self) -> bool:
        return bool(self.option(OPTION_USER_SERVICE, False))

    def __str__(self) -> str:
        return self.display_name or self.name
