import pytest

from create_ignite.project.compat import (
    CompatibilityRule,
    ConfigurationError,
    check_compatibility,
    ensure_compatible,
)


@pytest.mark.parametrize("state", ["redux", "zustand", "mobx"])
@pytest.mark.parametrize("framework", ["vue", "nuxt"])
def test_vue_rejects_react_stores(project_config, framework, state):
    violation = check_compatibility(project_config(framework=framework, state_management=state))

    assert violation.rule == CompatibilityRule.VUE_STATE_MANAGEMENT
    assert "Pinia or Vuex" in violation.reason


@pytest.mark.parametrize("state", ["pinia", "vuex"])
def test_react_rejects_vue_stores(project_config, state):
    violation = check_compatibility(project_config(framework="nextjs", state_management=state))
    assert violation.rule == CompatibilityRule.REACT_STATE_MANAGEMENT


def test_backend_rejects_css(project_config):
    config = project_config(project_type="backend", framework="express", css_framework="tailwind")
    violation = check_compatibility(config)
    assert violation.rule == CompatibilityRule.BACKEND_CSS_FRAMEWORK
    assert str(violation) == "CSS framework not applicable to backend projects."


def test_backend_rejects_state(project_config):
    config = project_config(project_type="backend", framework="fastify", state_management="redux")
    violation = check_compatibility(config)
    assert violation.rule == CompatibilityRule.BACKEND_STATE_MANAGEMENT


def test_first_violation_wins(project_config):
    config = project_config(
        project_type="backend",
        framework="express",
        css_framework="bootstrap",
        state_management="zustand",
    )
    assert check_compatibility(config).rule == CompatibilityRule.BACKEND_CSS_FRAMEWORK


@pytest.mark.parametrize(
    "kwargs",
    [
        {"framework": "react", "state_management": "redux", "css_framework": "material-ui"},
        {"framework": "vue", "state_management": "pinia", "css_framework": "tailwind"},
        {"framework": "express", "project_type": "backend"},
        {"framework": "fullstack", "project_type": "fullstack", "state_management": "zustand"},
    ],
)
def test_valid_configurations(project_config, kwargs):
    config = project_config(**kwargs)
    assert check_compatibility(config) is None
    assert ensure_compatible(config) is config


def test_ensure_compatible_raises(project_config):
    with pytest.raises(ConfigurationError, match="not compatible with Vue") as exc_info:
        ensure_compatible(project_config(framework="vue", state_management="redux"))

    assert exc_info.value.violation.rule == CompatibilityRule.VUE_STATE_MANAGEMENT


def test_backend_project_type_rejects_css(project_config):
    config = project_config(project_type="backend", framework="react", css_framework="tailwind")
    violation = check_compatibility(config)
    assert violation.rule == CompatibilityRule.BACKEND_CSS_FRAMEWORK


@pytest.mark.parametrize(
    ("project_type", "framework"),
    [
        ("frontend", "express"),
        ("frontend", "fullstack"),
        ("backend", "vue"),
        ("fullstack", "react"),
        ("fullstack", "fastify"),
    ],
)
def test_framework_must_match_project_type(project_config, project_type, framework):
    config = project_config(project_type=project_type, framework=framework)

    violation = check_compatibility(config)

    assert violation.rule == CompatibilityRule.PROJECT_TYPE_FRAMEWORK
    assert str(violation) == f"Framework {framework} is not available for {project_type} projects."


def test_project_type_checked_after_state_rules(project_config):
    config = project_config(project_type="fullstack", framework="vue", state_management="redux")
    assert check_compatibility(config).rule == CompatibilityRule.VUE_STATE_MANAGEMENT
