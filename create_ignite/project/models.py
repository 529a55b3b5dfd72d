import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from create_ignite.project.options import (
    BACKEND_FAMILY,
    REACT_FAMILY,
    VUE_FAMILY,
    CSSFramework,
    Framework,
    Language,
    PackageManager,
    ProjectType,
    StateManagement,
)

PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


class ProjectNameError(ValueError):
    """Project name is empty or contains unsupported characters."""


def validate_project_name(name: str) -> str:
    """
    Check that the project name can be used as a folder and package name.

    :param name: Project name as entered by the user.
    :return: The (unchanged) project name.
    :raises ProjectNameError: If the name is empty or invalid.
    """
    if not name:
        raise ProjectNameError("Project name is required")
    if not PROJECT_NAME_PATTERN.match(name):
        raise ProjectNameError("Project name can only contain letters, numbers, dashes, and underscores")
    return name


class ProjectConfiguration(BaseModel):
    """
    Resolved answers describing the project to generate.

    Instances are immutable; use `with_project_name()` (or `model_copy()`)
    to derive a changed configuration.

    Serialized (cached) form uses the camelCase field names, eg.
    `projectName`, `cssFramework`, `installESLint`.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    project_name: str = Field(alias="projectName", description="Project (and folder) name")
    project_type: ProjectType = Field(alias="projectType")
    framework: Framework
    language: Language = Language.TYPESCRIPT
    css_framework: CSSFramework = Field(CSSFramework.NONE, alias="cssFramework")
    state_management: StateManagement = Field(StateManagement.NONE, alias="stateManagement")
    install_router: bool = Field(False, alias="installRouter")
    install_icons: bool = Field(False, alias="installIcons")
    install_axios: bool = Field(False, alias="installAxios")
    package_manager: PackageManager = Field(PackageManager.NPM, alias="packageManager")
    git_init: bool = Field(True, alias="gitInit")
    install_eslint: bool = Field(True, alias="installESLint")
    install_prettier: bool = Field(True, alias="installPrettier")

    @field_validator("project_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_project_name(v)

    @property
    def is_react(self) -> bool:
        return self.framework in REACT_FAMILY

    @property
    def is_vue(self) -> bool:
        return self.framework in VUE_FAMILY

    @property
    def is_backend(self) -> bool:
        return self.framework in BACKEND_FAMILY

    @property
    def is_typescript(self) -> bool:
        return self.language == Language.TYPESCRIPT

    @property
    def run_command(self) -> str:
        """Prefix for running package.json scripts (eg. "npm run", "yarn")."""
        if self.package_manager == PackageManager.NPM:
            return "npm run"
        return self.package_manager.value

    def with_project_name(self, project_name: str) -> "ProjectConfiguration":
        """
        Return a copy of this configuration for a different project name.

        :param project_name: New project name (validated).
        :return: New configuration instance.
        """
        return type(self).model_validate({**self.model_dump(), "project_name": project_name})

    def to_record(self) -> dict[str, Any]:
        """Flat JSON-serializable record, as stored in the cache."""
        return self.model_dump(mode="json", by_alias=True)


class DependencyManifest(BaseModel):
    """
    Packages to install for a resolved configuration.

    Both lists keep the order in which the selection rules produced them
    and never contain duplicates.
    """

    model_config = ConfigDict(frozen=True)

    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_duplicates(self) -> "DependencyManifest":
        for field_name in ("dependencies", "dev_dependencies"):
            packages = getattr(self, field_name)
            if len(set(packages)) != len(packages):
                raise ValueError(f"Duplicate packages in {field_name}: {packages}")
        return self

    @property
    def empty(self) -> bool:
        return not self.dependencies and not self.dev_dependencies


__all__ = [
    "ProjectNameError",
    "validate_project_name",
    "ProjectConfiguration",
    "DependencyManifest",
]
