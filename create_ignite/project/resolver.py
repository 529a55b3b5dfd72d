from enum import Enum
from typing import Any, Iterable, Optional, TypeVar

from pydantic import BaseModel

from create_ignite.log import get_logger
from create_ignite.project.cache import ConfigStore
from create_ignite.project.compat import ensure_compatible
from create_ignite.project.models import ProjectConfiguration
from create_ignite.project.options import (
    BACKEND_FRAMEWORKS,
    CSS_FRAMEWORK_LABELS,
    FRAMEWORK_LABELS,
    FRONTEND_FRAMEWORKS,
    FULLSTACK_STATE_MANAGEMENT,
    LANGUAGE_LABELS,
    PACKAGE_MANAGER_LABELS,
    PROJECT_TYPE_LABELS,
    STATE_MANAGEMENT_LABELS,
    CSSFramework,
    Framework,
    Language,
    PackageManager,
    ProjectType,
    StateManagement,
    state_management_choices,
)
from create_ignite.ui.base import UIBase, UIClosedError, ignite_source

log = get_logger(__name__)

E = TypeVar("E", bound=Enum)

REUSE = "reuse"
FRESH = "fresh"

FULLSTACK_CSS_FRAMEWORKS = (CSSFramework.TAILWIND, CSSFramework.BOOTSTRAP, CSSFramework.NONE)


class Resolution(BaseModel):
    """
    Outcome of a configuration resolution.

    Exactly one of the following holds:
    * `config` is set: the user answered all questions (or reused the
      saved configuration, in which case `reused` is True);
    * `cancelled` is True: the user aborted one of the prompts.
    """

    config: Optional[ProjectConfiguration] = None
    cancelled: bool = False
    reused: bool = False


class ConfigurationResolver:
    """
    Ask the user how the project should be set up.

    Walks the questions for the chosen project type, then the questions
    common to all projects, and assembles an immutable `ProjectConfiguration`.
    A previously saved configuration can be reused instead, skipping all
    the questions.

    :param ui: UI used to ask the questions.
    :param store: Store holding the last used configuration.
    """

    def __init__(self, ui: UIBase, store: ConfigStore):
        self.ui = ui
        self.store = store

    async def resolve(self, project_name: str) -> Resolution:
        """
        Resolve the configuration for a new project.

        :param project_name: Already validated project name.
        :return: Resolution with the configuration, or a cancelled resolution.
        :raises ConfigurationError: If the resulting configuration is not valid.
        """
        try:
            config, reused = await self._collect(project_name)
        except UIClosedError:
            log.info("Configuration cancelled by user")
            return Resolution(cancelled=True)

        ensure_compatible(config)

        if reused:
            log.info(f"Reusing saved configuration for {project_name}")
            return Resolution(config=config, reused=True)

        if not self.store.save(config):
            await self.ui.send_message("Could not save configuration for future runs", source=ignite_source)

        return Resolution(config=config)

    async def _collect(self, project_name: str) -> tuple[ProjectConfiguration, bool]:
        saved = self.store.load()
        if saved and await self.ask_reuse(saved):
            return saved.with_project_name(project_name), True

        project_type = await self._choose(
            "What type of project do you want to create?",
            PROJECT_TYPE_LABELS,
            ProjectType,
            default=ProjectType.FRONTEND,
        )
        log.debug(f"Project type: {project_type.value}")

        if project_type == ProjectType.FRONTEND:
            answers = await self.ask_frontend()
        elif project_type == ProjectType.BACKEND:
            answers = await self.ask_backend()
        else:
            answers = await self.ask_fullstack()

        answers.update(await self.ask_common())

        return (
            ProjectConfiguration(
                project_name=project_name,
                project_type=project_type,
                **answers,
            ),
            False,
        )

    async def ask_reuse(self, saved: ProjectConfiguration) -> bool:
        await self.ui.send_message(
            "\n".join(
                [
                    "Previous configuration found:",
                    f"   Framework: {saved.framework.value}",
                    f"   Language: {saved.language.value}",
                    f"   CSS: {saved.css_framework.value}",
                    f"   State Mgmt: {saved.state_management.value}",
                ]
            ),
            source=ignite_source,
        )
        answer = await self._select(
            "How would you like to proceed?",
            {REUSE: "Use previous configuration", FRESH: "Start fresh (new setup)"},
            default=REUSE,
        )
        return answer == REUSE

    async def ask_frontend(self) -> dict[str, Any]:
        framework = await self._choose(
            "Which framework do you want to use?",
            FRAMEWORK_LABELS,
            FRONTEND_FRAMEWORKS,
            default=Framework.REACT,
        )
        language = await self.ask_language()
        css_framework = await self._choose(
            "Which CSS framework?",
            CSS_FRAMEWORK_LABELS,
            CSSFramework,
            default=CSSFramework.TAILWIND,
        )
        state_management = await self._choose(
            "State management library?",
            STATE_MANAGEMENT_LABELS,
            state_management_choices(framework),
            default=StateManagement.NONE,
        )

        return {
            "framework": framework,
            "language": language,
            "css_framework": css_framework,
            "state_management": state_management,
            "install_router": await self._confirm("Install router?"),
            "install_icons": await self._confirm("Install icon library?"),
            "install_axios": await self._confirm("Install Axios (HTTP client)?"),
        }

    async def ask_backend(self) -> dict[str, Any]:
        framework = await self._choose(
            "Which backend framework?",
            FRAMEWORK_LABELS,
            BACKEND_FRAMEWORKS,
            default=Framework.EXPRESS,
        )
        return {
            "framework": framework,
            "language": await self.ask_language(),
            "css_framework": CSSFramework.NONE,
            "state_management": StateManagement.NONE,
            "install_router": False,
            "install_icons": False,
            "install_axios": False,
        }

    async def ask_fullstack(self) -> dict[str, Any]:
        language = await self.ask_language()
        css_framework = await self._choose(
            "Which CSS framework for frontend?",
            CSS_FRAMEWORK_LABELS,
            FULLSTACK_CSS_FRAMEWORKS,
            default=CSSFramework.TAILWIND,
        )
        state_management = await self._choose(
            "State management for frontend?",
            STATE_MANAGEMENT_LABELS,
            FULLSTACK_STATE_MANAGEMENT,
            default=StateManagement.REDUX,
        )
        return {
            "framework": Framework.FULLSTACK,
            "language": language,
            "css_framework": css_framework,
            "state_management": state_management,
            "install_router": True,
            "install_icons": True,
            "install_axios": True,
        }

    async def ask_language(self) -> Language:
        return await self._choose("Which language?", LANGUAGE_LABELS, Language, default=Language.TYPESCRIPT)

    async def ask_common(self) -> dict[str, Any]:
        return {
            "package_manager": await self._choose(
                "Which package manager?",
                PACKAGE_MANAGER_LABELS,
                PackageManager,
                default=PackageManager.NPM,
            ),
            "git_init": await self._confirm("Initialize git repository?"),
            "install_eslint": await self._confirm("Install ESLint?"),
            "install_prettier": await self._confirm("Install Prettier?"),
        }

    async def _select(self, question: str, buttons: dict[str, str], default: str) -> str:
        """
        Ask a multiple-choice question.

        Answers outside of the offered buttons are rejected and the
        question is asked again.

        :raises UIClosedError: If the user cancels the question.
        """
        while True:
            answer = await self.ui.ask_question(
                question,
                buttons=buttons,
                default=default,
                buttons_only=True,
                source=ignite_source,
            )
            if answer.cancelled:
                raise UIClosedError()
            if answer.button in buttons:
                return answer.button
            log.warning(f"Ignoring invalid answer {answer.button!r} to {question!r}")

    async def _choose(self, question: str, labels: dict[E, str], options: Iterable[E], default: E) -> E:
        options = list(options)
        button = await self._select(
            question,
            {option.value: labels[option] for option in options},
            default=default.value,
        )
        return type(default)(button)

    async def _confirm(self, question: str, default: bool = True) -> bool:
        button = await self._select(question, {"yes": "Yes", "no": "No"}, default="yes" if default else "no")
        return button == "yes"


__all__ = ["Resolution", "ConfigurationResolver"]
