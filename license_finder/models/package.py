"""Package and license Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from license_finder.constants import UNKNOWN_LICENSE


class License(BaseModel):
    """A license declared by a dependency."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="License name as declared in the report")
    url: Optional[str] = Field(
        default=None, description="License URL, if the report carries one"
    )


def unknown_licenses() -> tuple[License, ...]:
    """Return the license list used when a dependency declares none."""
    return (License(name=UNKNOWN_LICENSE),)


class Package(BaseModel):
    """A third-party dependency reported by a package manager.

    Packages are immutable and hashable so duplicates reported by several
    modules of one build can be collapsed.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(default="", description="Package name")
    version: str = Field(default="", description="Package version")
    licenses: tuple[License, ...] = Field(
        default_factory=unknown_licenses,
        description="Declared licenses, in report order (never empty)",
    )
    groups: tuple[str, ...] = Field(
        default=(), description="Groups the package belongs to (e.g. groupId)"
    )
    package_manager: str = Field(
        default="", description="Name of the package manager that reported it"
    )
    package_url: Optional[str] = Field(
        default=None, description="URL of the package's registry page"
    )

    @field_validator("licenses")
    @classmethod
    def _default_to_unknown(cls, value: tuple[License, ...]) -> tuple[License, ...]:
        if not value:
            return unknown_licenses()
        return value

    @property
    def license_names(self) -> list[str]:
        """Names of the declared licenses, in order."""
        return [license.name for license in self.licenses]
