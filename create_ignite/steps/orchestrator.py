from typing import Optional

from create_ignite.config import Config, get_config
from create_ignite.log import get_logger
from create_ignite.proc.process_manager import ProcessManager
from create_ignite.project.dependencies import select_dependencies
from create_ignite.project.models import ProjectConfiguration
from create_ignite.steps.base import BaseStep
from create_ignite.steps.cleanup import Cleanup
from create_ignite.steps.framework import FrameworkSetup
from create_ignite.steps.git import GitInit
from create_ignite.steps.installer import Installer
from create_ignite.steps.scaffolder import Scaffolder
from create_ignite.steps.summary import SuccessSummary
from create_ignite.templates.render import Renderer
from create_ignite.ui.base import UIBase, ignite_source

log = get_logger(__name__)


class Orchestrator:
    """
    Generate the project for a resolved configuration.

    Runs the generation steps in a fixed order:
    scaffold, install, framework setup, cleanup, git, summary.
    The first failing step (`StepError`) stops the run and the error
    propagates to the caller.
    """

    def __init__(
        self,
        config: ProjectConfiguration,
        ui: UIBase,
        process_manager: ProcessManager,
        *,
        root_dir: str,
        app_config: Optional[Config] = None,
    ):
        self.config = config
        self.ui = ui
        self.process_manager = process_manager
        self.root_dir = root_dir
        self.app_config = app_config or get_config()
        self.renderer = Renderer()

    def create_steps(self) -> list[BaseStep]:
        manifest = select_dependencies(self.config)
        log.debug(f"Selected packages: {manifest.dependencies} / dev: {manifest.dev_dependencies}")

        args = (self.config, self.ui, self.process_manager)
        kwargs = {"root_dir": self.root_dir}
        return [
            Scaffolder(*args, renderer=self.renderer, **kwargs),
            Installer(*args, manifest=manifest, install_config=self.app_config.install, **kwargs),
            FrameworkSetup(*args, renderer=self.renderer, **kwargs),
            Cleanup(*args, **kwargs),
            GitInit(*args, **kwargs),
            SuccessSummary(*args, renderer=self.renderer, **kwargs),
        ]

    async def run(self):
        """
        Run all the steps.

        :raises StepError: If any of the steps failed.
        """
        await self.ui.send_message("Setting up your project...", source=ignite_source)

        for step in self.create_steps():
            log.info(f"Running step {step.step_type} for {self.config.project_name}")
            await step.run()

        log.info(f"Project {self.config.project_name} created in {self.root_dir}")


__all__ = ["Orchestrator"]
