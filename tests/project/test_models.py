import pytest
from pydantic import ValidationError

from create_ignite.project.models import (
    DependencyManifest,
    ProjectConfiguration,
    ProjectNameError,
    validate_project_name,
)
from create_ignite.project.options import Framework, Language, PackageManager, ProjectType


@pytest.mark.parametrize("name", ["my-app", "my_app", "App2", "a"])
def test_validate_project_name_accepts(name):
    assert validate_project_name(name) == name


def test_validate_project_name_requires_name():
    with pytest.raises(ProjectNameError, match="Project name is required"):
        validate_project_name("")


@pytest.mark.parametrize("name", ["my app", "my.app", "app/x", "ünïcode", "../x"])
def test_validate_project_name_rejects(name):
    with pytest.raises(ProjectNameError, match="can only contain letters"):
        validate_project_name(name)


def test_configuration_defaults():
    config = ProjectConfiguration(project_name="x", project_type=ProjectType.FRONTEND, framework=Framework.REACT)

    assert config.language == Language.TYPESCRIPT
    assert config.package_manager == PackageManager.NPM
    assert config.git_init is True
    assert config.install_eslint is True
    assert config.install_router is False
    assert config.is_react
    assert config.is_typescript
    assert not config.is_vue
    assert not config.is_backend


def test_configuration_rejects_invalid_name():
    with pytest.raises(ValidationError):
        ProjectConfiguration(project_name="bad name", project_type="frontend", framework="react")


def test_configuration_is_frozen(project_config):
    config = project_config()
    with pytest.raises(ValidationError):
        config.framework = Framework.VUE


def test_record_uses_camel_case(project_config):
    record = project_config(css_framework="tailwind", install_eslint=False).to_record()

    assert record["projectName"] == "my-app"
    assert record["projectType"] == "frontend"
    assert record["cssFramework"] == "tailwind"
    assert record["installESLint"] is False
    assert record["packageManager"] == "npm"
    assert "project_name" not in record


def test_record_loads_back(project_config):
    config = project_config(framework="vue", state_management="pinia", language="js")
    assert ProjectConfiguration.model_validate(config.to_record()) == config


def test_with_project_name(project_config):
    config = project_config(framework="nuxt")
    renamed = config.with_project_name("other")

    assert renamed.project_name == "other"
    assert renamed.framework == Framework.NUXT
    assert config.project_name == "my-app"

    with pytest.raises(ValidationError):
        config.with_project_name("no spaces allowed")


@pytest.mark.parametrize(
    ("manager", "expected"),
    [("npm", "npm run"), ("yarn", "yarn"), ("pnpm", "pnpm")],
)
def test_run_command(project_config, manager, expected):
    assert project_config(package_manager=manager).run_command == expected


def test_manifest_rejects_duplicates():
    with pytest.raises(ValidationError):
        DependencyManifest(dependencies=("axios", "axios"))

    assert DependencyManifest().empty
    assert not DependencyManifest(dev_dependencies=("eslint",)).empty
