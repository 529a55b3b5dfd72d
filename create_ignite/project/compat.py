"""
Cross-field compatibility rules for project configurations.

The resolver only offers valid state management libraries for the chosen
framework, but configurations can also come from the cache or be built
programmatically, so every configuration is checked against these rules
before it is accepted.

Rules are checked in a fixed order and the first violation wins.
"""

from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel

from create_ignite.project.models import ProjectConfiguration
from create_ignite.project.options import (
    BACKEND_FAMILY,
    BACKEND_FRAMEWORKS,
    FRONTEND_FRAMEWORKS,
    REACT_FAMILY,
    VUE_FAMILY,
    CSSFramework,
    Framework,
    ProjectType,
    StateManagement,
)

PROJECT_TYPE_FRAMEWORKS = {
    ProjectType.FRONTEND: frozenset(FRONTEND_FRAMEWORKS),
    ProjectType.BACKEND: frozenset(BACKEND_FRAMEWORKS),
    ProjectType.FULLSTACK: frozenset({Framework.FULLSTACK}),
}
REACT_ONLY_STATE = frozenset({StateManagement.REDUX, StateManagement.ZUSTAND, StateManagement.MOBX})
VUE_ONLY_STATE = frozenset({StateManagement.PINIA, StateManagement.VUEX})


class CompatibilityRule(str, Enum):
    VUE_STATE_MANAGEMENT = "vue-state-management"
    REACT_STATE_MANAGEMENT = "react-state-management"
    BACKEND_CSS_FRAMEWORK = "backend-css-framework"
    BACKEND_STATE_MANAGEMENT = "backend-state-management"
    PROJECT_TYPE_FRAMEWORK = "project-type-framework"


class Violation(BaseModel):
    """
    A broken compatibility rule.

    Attributes:
    * `rule`: Which rule was broken.
    * `reason`: Human-readable explanation, shown to the user.
    """

    rule: CompatibilityRule
    reason: str

    def __str__(self) -> str:
        return self.reason


class ConfigurationError(Exception):
    """The project configuration violates a compatibility rule."""

    def __init__(self, violation: Violation):
        super().__init__(violation.reason)
        self.violation = violation


def _is_backend(config: ProjectConfiguration) -> bool:
    return config.project_type == ProjectType.BACKEND or config.framework in BACKEND_FAMILY


def _vue_state_management(config: ProjectConfiguration) -> Optional[Violation]:
    if config.framework in VUE_FAMILY and config.state_management in REACT_ONLY_STATE:
        return Violation(
            rule=CompatibilityRule.VUE_STATE_MANAGEMENT,
            reason=(
                f"Incompatible state management for Vue: {config.state_management.value} "
                "is not compatible with Vue. Use Pinia or Vuex instead."
            ),
        )
    return None


def _react_state_management(config: ProjectConfiguration) -> Optional[Violation]:
    if config.framework in REACT_FAMILY and config.state_management in VUE_ONLY_STATE:
        return Violation(
            rule=CompatibilityRule.REACT_STATE_MANAGEMENT,
            reason=(
                f"Incompatible state management for React: {config.state_management.value} "
                "is not compatible with React. Use Redux, Zustand or MobX instead."
            ),
        )
    return None


def _backend_css_framework(config: ProjectConfiguration) -> Optional[Violation]:
    if _is_backend(config) and config.css_framework != CSSFramework.NONE:
        return Violation(
            rule=CompatibilityRule.BACKEND_CSS_FRAMEWORK,
            reason="CSS framework not applicable to backend projects.",
        )
    return None


def _backend_state_management(config: ProjectConfiguration) -> Optional[Violation]:
    if _is_backend(config) and config.state_management != StateManagement.NONE:
        return Violation(
            rule=CompatibilityRule.BACKEND_STATE_MANAGEMENT,
            reason="State management not applicable to backend projects.",
        )
    return None


def _project_type_framework(config: ProjectConfiguration) -> Optional[Violation]:
    if config.framework not in PROJECT_TYPE_FRAMEWORKS[config.project_type]:
        return Violation(
            rule=CompatibilityRule.PROJECT_TYPE_FRAMEWORK,
            reason=(
                f"Framework {config.framework.value} is not available for "
                f"{config.project_type.value} projects."
            ),
        )
    return None


RULES: tuple[Callable[[ProjectConfiguration], Optional[Violation]], ...] = (
    _vue_state_management,
    _react_state_management,
    _backend_css_framework,
    _backend_state_management,
    _project_type_framework,
)


def check_compatibility(config: ProjectConfiguration) -> Optional[Violation]:
    """
    Check the configuration against all compatibility rules.

    :param config: Configuration to check.
    :return: The first violation found, or None if the configuration is valid.
    """
    for rule in RULES:
        violation = rule(config)
        if violation:
            return violation
    return None


def ensure_compatible(config: ProjectConfiguration) -> ProjectConfiguration:
    """
    Like `check_compatibility()`, but raise on violation.

    :param config: Configuration to check.
    :return: The same configuration, if valid.
    :raises ConfigurationError: If any rule is violated.
    """
    violation = check_compatibility(config)
    if violation:
        raise ConfigurationError(violation)
    return config


__all__ = [
    "CompatibilityRule",
    "Violation",
    "ConfigurationError",
    "check_compatibility",
    "ensure_compatible",
]
