from os import makedirs
from os.path import isdir, join
from typing import Optional

from create_ignite.log import get_logger
from create_ignite.project.options import Framework
from create_ignite.steps.base import BaseStep, StepError, StepErrorCode
from create_ignite.templates.render import Renderer

log = get_logger(__name__)

# Template files whose names can't be shipped as-is in a Python package
RENAMED_TEMPLATE_FILES = {
    "_gitignore": ".gitignore",
    "_env": ".env",
}

BACKEND_FOLDERS = {
    Framework.EXPRESS: ("src/routes", "src/controllers", "src/middleware"),
    Framework.FASTIFY: ("src/routes", "src/plugins"),
}

FULLSTACK_FOLDERS = (
    "apps/frontend/public",
    "apps/backend/src/routes",
    "apps/backend/src/controllers",
    "packages/shared",
    "docs",
)

FULLSTACK_TYPESCRIPT_ONLY = (
    "apps/frontend/tsconfig.json",
    "apps/frontend/tsconfig.node.json",
    "apps/backend/tsconfig.json",
    "packages/shared/types.ts",
)

TYPESCRIPT_EXTENSIONS = {".js": ".ts", ".jsx": ".tsx"}


def scaffold_command(framework: Framework, project_name: str, typescript: bool) -> Optional[str]:
    """
    Command running the upstream generator for a frontend framework.

    :param framework: Chosen framework.
    :param project_name: Project (folder) name.
    :param typescript: Whether the project uses TypeScript.
    :return: Shell command, or None if the project is generated from templates.
    """
    if framework in (Framework.REACT, Framework.VUE):
        template = framework.value + ("-ts" if typescript else "")
        return f"npm create vite@latest {project_name} -- --template {template}"

    if framework == Framework.NEXTJS:
        language_flag = "--typescript" if typescript else "--js"
        return (
            f"npx create-next-app@latest {project_name} --no-install {language_flag} "
            '--eslint --app --src-dir --import-alias "@/*"'
        )

    if framework == Framework.NUXT:
        return f"npx nuxi init {project_name}"

    return None


def with_language_extension(path: str, typescript: bool) -> str:
    """Swap .js/.jsx for .ts/.tsx in TypeScript projects."""
    if not typescript:
        return path
    for js_ext, ts_ext in TYPESCRIPT_EXTENSIONS.items():
        if path.endswith(js_ext):
            return path[: -len(js_ext)] + ts_ext
    return path


class Scaffolder(BaseStep):
    """
    Create the initial project structure.

    Frontend frameworks are generated by their upstream tools (Vite,
    create-next-app, nuxi); backend and fullstack projects are rendered
    from the bundled templates.
    """

    step_type = "scaffolder"
    display_name = "Scaffolder"

    def __init__(self, *args, renderer: Optional[Renderer] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.renderer = renderer or Renderer()

    async def run(self):
        framework = self.config.framework
        await self.send_message(f"Creating {framework.value} project...")

        try:
            if self.config.is_backend:
                self.render_backend()
            elif framework == Framework.FULLSTACK:
                self.render_fullstack()
            else:
                await self.run_generator()
        except OSError as err:
            raise StepError(
                f"Failed to scaffold {framework.value} project: {err}",
                StepErrorCode.SCAFFOLD_FAILED,
            ) from err

        await self.send_message("Project scaffolded successfully")

    async def run_generator(self):
        cmd = scaffold_command(self.config.framework, self.config.project_name, self.config.is_typescript)
        exec_log = await self.run_command(cmd, cwd=".")
        if not exec_log.success:
            raise StepError(
                f"Failed to scaffold {self.config.framework.value} project: {exec_log.output or cmd}",
                StepErrorCode.SCAFFOLD_FAILED,
                exec_log,
            )
        if not isdir(self.project_dir):
            raise StepError(
                f"Failed to scaffold {self.config.framework.value} project: {self.project_dir} was not created",
                StepErrorCode.SCAFFOLD_FAILED,
                exec_log,
            )

    def backend_filter(self, path: str) -> Optional[str]:
        path = RENAMED_TEMPLATE_FILES.get(path, path)
        if path.startswith("src/"):
            return with_language_extension(path, self.config.is_typescript)
        return path

    def render_backend(self):
        files = self.renderer.write_tree("backend", self.template_context, self.project_dir, self.backend_filter)
        for folder in BACKEND_FOLDERS[self.config.framework]:
            makedirs(join(self.project_dir, folder), exist_ok=True)
        log.info(f"Rendered {len(files)} backend files into {self.project_dir}")

    def fullstack_filter(self, path: str) -> Optional[str]:
        typescript = self.config.is_typescript
        if not typescript and path in FULLSTACK_TYPESCRIPT_ONLY:
            log.debug(f"Skipping {path} for JavaScript project")
            return None

        folder, _, name = path.rpartition("/")
        name = RENAMED_TEMPLATE_FILES.get(name, name)
        path = f"{folder}/{name}" if folder else name

        if path.startswith(("apps/frontend/src/", "apps/backend/src/")) or path == "apps/frontend/vite.config.js":
            return with_language_extension(path, typescript)
        return path

    def render_fullstack(self):
        files = self.renderer.write_tree("fullstack", self.template_context, self.project_dir, self.fullstack_filter)
        for folder in FULLSTACK_FOLDERS:
            makedirs(join(self.project_dir, folder), exist_ok=True)
        log.info(f"Rendered {len(files)} fullstack files into {self.project_dir}")


__all__ = ["scaffold_command", "Scaffolder"]
