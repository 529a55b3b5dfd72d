from enum import Enum


class ProjectType(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"


class Framework(str, Enum):
    REACT = "react"
    NEXTJS = "nextjs"
    VUE = "vue"
    NUXT = "nuxt"
    EXPRESS = "express"
    FASTIFY = "fastify"
    FULLSTACK = "fullstack"


class Language(str, Enum):
    TYPESCRIPT = "ts"
    JAVASCRIPT = "js"


class CSSFramework(str, Enum):
    TAILWIND = "tailwind"
    BOOTSTRAP = "bootstrap"
    MATERIAL_UI = "material-ui"
    CHAKRA_UI = "chakra-ui"
    NONE = "none"


class StateManagement(str, Enum):
    NONE = "none"
    REDUX = "redux"
    ZUSTAND = "zustand"
    MOBX = "mobx"
    PINIA = "pinia"
    VUEX = "vuex"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


REACT_FAMILY = frozenset({Framework.REACT, Framework.NEXTJS})
VUE_FAMILY = frozenset({Framework.VUE, Framework.NUXT})
BACKEND_FAMILY = frozenset({Framework.EXPRESS, Framework.FASTIFY})

REACT_STATE_MANAGEMENT = (
    StateManagement.NONE,
    StateManagement.REDUX,
    StateManagement.ZUSTAND,
    StateManagement.MOBX,
)
VUE_STATE_MANAGEMENT = (
    StateManagement.NONE,
    StateManagement.PINIA,
    StateManagement.VUEX,
)

# Fullstack projects ship a React frontend, but only offer the two bundled stores
FULLSTACK_STATE_MANAGEMENT = (
    StateManagement.REDUX,
    StateManagement.ZUSTAND,
    StateManagement.NONE,
)

FRONTEND_FRAMEWORKS = (Framework.REACT, Framework.NEXTJS, Framework.VUE, Framework.NUXT)
BACKEND_FRAMEWORKS = (Framework.EXPRESS, Framework.FASTIFY)


def state_management_choices(framework: Framework) -> tuple[StateManagement, ...]:
    """
    State management libraries that can be offered for a framework.

    React-family frameworks get the React stores, Vue-family frameworks
    get the Vue stores, anything else can only go without one.

    :param framework: Framework chosen by the user.
    :return: Offered options, in display order.
    """
    if framework in REACT_FAMILY:
        return REACT_STATE_MANAGEMENT
    if framework in VUE_FAMILY:
        return VUE_STATE_MANAGEMENT
    return (StateManagement.NONE,)


PROJECT_TYPE_LABELS = {
    ProjectType.FRONTEND: "Frontend (SPA/SSR) - React, Vue, Next.js, Nuxt",
    ProjectType.BACKEND: "Backend API - Express, Fastify",
    ProjectType.FULLSTACK: "Full-Stack Application - monorepo with frontend + backend",
}

FRAMEWORK_LABELS = {
    Framework.REACT: "React (Vite)",
    Framework.NEXTJS: "Next.js",
    Framework.VUE: "Vue 3 (Vite)",
    Framework.NUXT: "Nuxt 3",
    Framework.EXPRESS: "Express",
    Framework.FASTIFY: "Fastify",
    Framework.FULLSTACK: "React + Express",
}

LANGUAGE_LABELS = {
    Language.TYPESCRIPT: "TypeScript",
    Language.JAVASCRIPT: "JavaScript",
}

CSS_FRAMEWORK_LABELS = {
    CSSFramework.TAILWIND: "Tailwind CSS v4",
    CSSFramework.BOOTSTRAP: "Bootstrap 5",
    CSSFramework.MATERIAL_UI: "Material-UI (MUI)",
    CSSFramework.CHAKRA_UI: "Chakra UI",
    CSSFramework.NONE: "None",
}

STATE_MANAGEMENT_LABELS = {
    StateManagement.NONE: "None",
    StateManagement.REDUX: "Redux Toolkit",
    StateManagement.ZUSTAND: "Zustand",
    StateManagement.MOBX: "MobX",
    StateManagement.PINIA: "Pinia (recommended)",
    StateManagement.VUEX: "Vuex",
}

PACKAGE_MANAGER_LABELS = {
    PackageManager.NPM: "npm",
    PackageManager.YARN: "yarn",
    PackageManager.PNPM: "pnpm",
}


__all__ = [
    "ProjectType",
    "Framework",
    "Language",
    "CSSFramework",
    "StateManagement",
    "PackageManager",
    "REACT_FAMILY",
    "VUE_FAMILY",
    "BACKEND_FAMILY",
    "state_management_choices",
]
