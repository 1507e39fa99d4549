"""Configuration Pydantic models for license-finder."""
from __future__ import annotations

import shlex
from collections.abc import Iterable
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def _check_command_options(value: Optional[str]) -> Optional[str]:
    """Reject options that cannot be split into command line arguments."""
    if value is not None:
        try:
            shlex.split(value)
        except ValueError as e:
            raise ValueError(f"cannot be parsed as command line options: {e}") from e
    return value


class AdapterConfig(BaseModel):
    """Settings handed to a package manager adapter at construction.

    Read-only for the adapter's lifetime.
    """

    model_config = {"extra": "forbid", "frozen": True}

    project_path: Path = Field(description="Directory of the project to inspect")
    ignored_groups: tuple[str, ...] = Field(
        default=(),
        description="Dependency scopes to exclude, in insertion order. "
        "Duplicates are dropped.",
    )
    maven_include_groups: bool = Field(
        default=False,
        description="Report Maven packages as groupId:artifactId.",
    )
    maven_options: Optional[str] = Field(
        default=None,
        description="Extra options appended to the Maven command line.",
    )

    @field_validator("ignored_groups", mode="before")
    @classmethod
    def _keep_insertion_order(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, Iterable):
            return _ordered_unique(value)
        return value

    @field_validator("maven_options")
    @classmethod
    def _maven_options_split(cls, value: Optional[str]) -> Optional[str]:
        return _check_command_options(value)


class FinderConfig(BaseModel):
    """Configuration file contents for license-finder.

    All fields are optional with None defaults to allow partial configuration.
    """

    model_config = {"extra": "forbid"}

    ignored_groups: Optional[List[str]] = Field(
        default=None,
        description="Dependency scopes (e.g. test, provided) to leave out.",
    )
    maven_include_groups: Optional[bool] = Field(
        default=None,
        description="Prefix Maven package names with their groupId.",
    )
    maven_options: Optional[str] = Field(
        default=None,
        description="Extra options appended to every Maven report command.",
    )

    @field_validator("maven_options")
    @classmethod
    def _maven_options_split(cls, value: Optional[str]) -> Optional[str]:
        return _check_command_options(value)

    def adapter_config(self, project_path: Path) -> AdapterConfig:
        """Build the adapter settings for a project directory.

        Args:
            project_path: Directory of the project to inspect.

        Returns:
            AdapterConfig with unset fields at their defaults.
        """
        return AdapterConfig(
            project_path=project_path,
            ignored_groups=self.ignored_groups or (),
            maven_include_groups=bool(self.maven_include_groups),
            maven_options=self.maven_options,
        )
