from os.path import exists, join

from create_ignite.log import get_logger
from create_ignite.steps.base import BaseStep, StepError, StepErrorCode

log = get_logger(__name__)

GITIGNORE_CONTENT = """node_modules/
dist/
build/
.env
.env.local
*.log
.DS_Store
"""

INITIAL_COMMIT_MESSAGE = "Initial commit from create-ignite"


class GitInit(BaseStep):
    """
    Initialize a git repository with an initial commit.

    Skipped if the user didn't ask for it; a missing git binary is
    only a warning.
    """

    step_type = "git"
    display_name = "Git"

    async def check_git_installed(self) -> bool:
        """Check if git is installed on the system."""
        exec_log = await self.run_command("git --version", cwd=".", show_output=False)
        return exec_log.success

    async def is_git_initialized(self) -> bool:
        """Check if the project folder already is a git repository."""
        return exists(join(self.project_dir, ".git"))

    async def git(self, args: str, error: str) -> str:
        exec_log = await self.run_command(f"git {args}", show_output=False)
        if not exec_log.success:
            raise StepError(f"{error}: {exec_log.output}", StepErrorCode.GIT_INIT_FAILED, exec_log)
        return exec_log.stdout

    async def run(self):
        if not self.config.git_init:
            log.debug("Git initialization not requested")
            return

        if not await self.check_git_installed():
            await self.warn("Git is not installed; skipping repository initialization")
            return

        if not await self.is_git_initialized():
            await self.git("init", "Failed to initialize git repository")

        gitignore_path = join(self.project_dir, ".gitignore")
        if not exists(gitignore_path):
            try:
                with open(gitignore_path, "w", encoding="utf-8") as f:
                    f.write(GITIGNORE_CONTENT)
            except OSError as err:
                raise StepError(f"Failed to create .gitignore file: {err}", StepErrorCode.GIT_INIT_FAILED) from err

        status = await self.git("status --porcelain", "Failed to get git status")
        if status.strip():
            await self.git("add .", "Failed to stage files")
            try:
                await self.git(f'commit -m "{INITIAL_COMMIT_MESSAGE}"', "Failed to create initial commit")
            except StepError as err:
                # usually missing user.name/user.email
                await self.warn(err.message)
                return

        await self.send_message("Git repository initialized")


__all__ = ["GitInit"]
