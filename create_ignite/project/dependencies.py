"""
Dependency selection.

Maps a resolved `ProjectConfiguration` to the packages that need to be
installed on top of what the framework scaffolding tool already sets up.

Each concern (framework, CSS, state management, ...) is a pure function
returning the packages it needs. Concerns are applied in a fixed order
and their results concatenated, dropping repeated packages, so the
resulting manifest is stable and each rule can be tested on its own.
"""

from typing import Callable, NamedTuple

from create_ignite.log import get_logger
from create_ignite.project.models import DependencyManifest, ProjectConfiguration
from create_ignite.project.options import (
    CSSFramework,
    Framework,
    ProjectType,
    StateManagement,
)

log = get_logger(__name__)


class PackageSelection(NamedTuple):
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()


NOTHING = PackageSelection()

STATE_MANAGEMENT_PACKAGES = {
    StateManagement.NONE: (),
    StateManagement.REDUX: ("@reduxjs/toolkit", "react-redux"),
    StateManagement.ZUSTAND: ("zustand",),
    StateManagement.MOBX: ("mobx", "mobx-react-lite"),
    StateManagement.PINIA: ("pinia",),
    StateManagement.VUEX: ("vuex",),
}

ROUTER_PACKAGES = {
    Framework.REACT: "react-router-dom",
    Framework.VUE: "vue-router",
}

TYPESCRIPT_TYPE_PACKAGES = {
    Framework.REACT: ("@types/react", "@types/react-dom"),
    Framework.EXPRESS: ("@types/node", "@types/express", "tsx"),
    Framework.FASTIFY: ("@types/node", "tsx"),
}


def framework_packages(config: ProjectConfiguration) -> PackageSelection:
    # Frontend frameworks are installed by their scaffolding tool
    if config.is_backend:
        return PackageSelection(dependencies=(config.framework.value,))
    return NOTHING


def css_framework_packages(config: ProjectConfiguration) -> PackageSelection:
    if config.project_type == ProjectType.BACKEND or config.is_backend:
        return NOTHING

    css = config.css_framework
    if css == CSSFramework.TAILWIND:
        return PackageSelection(dev_dependencies=("tailwindcss", "@tailwindcss/vite"))
    if css == CSSFramework.BOOTSTRAP:
        return PackageSelection(dependencies=("bootstrap",))
    if css == CSSFramework.MATERIAL_UI and config.is_react:
        return PackageSelection(dependencies=("@mui/material", "@emotion/react", "@emotion/styled"))
    if css == CSSFramework.CHAKRA_UI and config.is_react:
        return PackageSelection(dependencies=("@chakra-ui/react", "@emotion/react", "@emotion/styled"))
    return NOTHING


def state_management_packages(config: ProjectConfiguration) -> PackageSelection:
    return PackageSelection(dependencies=STATE_MANAGEMENT_PACKAGES[config.state_management])


def router_packages(config: ProjectConfiguration) -> PackageSelection:
    # Next.js and Nuxt have built-in routing
    if config.install_router and config.framework in ROUTER_PACKAGES:
        return PackageSelection(dependencies=(ROUTER_PACKAGES[config.framework],))
    return NOTHING


def icon_packages(config: ProjectConfiguration) -> PackageSelection:
    if config.install_icons:
        return PackageSelection(dependencies=("react-icons",))
    return NOTHING


def axios_packages(config: ProjectConfiguration) -> PackageSelection:
    if config.install_axios:
        return PackageSelection(dependencies=("axios",))
    return NOTHING


def typescript_packages(config: ProjectConfiguration) -> PackageSelection:
    if not config.is_typescript:
        return NOTHING
    types = TYPESCRIPT_TYPE_PACKAGES.get(config.framework, ())
    return PackageSelection(dev_dependencies=("typescript", *types))


def eslint_packages(config: ProjectConfiguration) -> PackageSelection:
    if not config.install_eslint:
        return NOTHING
    if config.is_react:
        return PackageSelection(dev_dependencies=("eslint", "eslint-plugin-react", "eslint-plugin-react-hooks"))
    if config.is_vue:
        return PackageSelection(dev_dependencies=("eslint", "eslint-plugin-vue"))
    return PackageSelection(dev_dependencies=("eslint",))


def prettier_packages(config: ProjectConfiguration) -> PackageSelection:
    if config.install_prettier:
        return PackageSelection(dev_dependencies=("prettier",))
    return NOTHING


def backend_packages(config: ProjectConfiguration) -> PackageSelection:
    if not config.is_backend:
        return NOTHING
    # TypeScript backends reload with tsx instead
    dev = () if config.is_typescript else ("nodemon",)
    return PackageSelection(dependencies=("cors", "dotenv"), dev_dependencies=dev)


CONCERNS: tuple[tuple[str, Callable[[ProjectConfiguration], PackageSelection]], ...] = (
    ("framework", framework_packages),
    ("css", css_framework_packages),
    ("state", state_management_packages),
    ("router", router_packages),
    ("icons", icon_packages),
    ("axios", axios_packages),
    ("typescript", typescript_packages),
    ("eslint", eslint_packages),
    ("prettier", prettier_packages),
    ("backend", backend_packages),
)


def select_dependencies(config: ProjectConfiguration) -> DependencyManifest:
    """
    Compute the packages to install for a project configuration.

    :param config: Resolved project configuration.
    :return: Dependency manifest with runtime and development packages.
    """
    dependencies: dict[str, None] = {}
    dev_dependencies: dict[str, None] = {}

    for name, concern in CONCERNS:
        selection = concern(config)
        if selection.dependencies or selection.dev_dependencies:
            log.debug(f"Packages for {name}: {selection.dependencies} / dev: {selection.dev_dependencies}")
        dependencies.update(dict.fromkeys(selection.dependencies))
        dev_dependencies.update(dict.fromkeys(selection.dev_dependencies))

    return DependencyManifest(
        dependencies=tuple(dependencies),
        dev_dependencies=tuple(pkg for pkg in dev_dependencies if pkg not in dependencies),
    )


__all__ = ["PackageSelection", "CONCERNS", "select_dependencies"]
