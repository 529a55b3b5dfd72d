import shutil
from os import listdir, remove
from os.path import isdir, islink, join, lexists

from create_ignite.log import get_logger
from create_ignite.project.options import Framework
from create_ignite.steps.base import BaseStep

log = get_logger(__name__)

# (files to delete, folders to empty) relative to the project folder
CLEANUP_RULES = {
    Framework.REACT: (("src/App.css", "src/logo.svg", "public/vite.svg"), ("src/assets", "public")),
    Framework.VUE: (("src/App.css", "src/logo.svg", "public/vite.svg"), ("src/assets", "public")),
    Framework.NEXTJS: (("public/vercel.svg", "public/next.svg"), ()),
    Framework.NUXT: ((), ("public",)),
}


def delete_path(path: str):
    if isdir(path) and not islink(path):
        shutil.rmtree(path)
    else:
        remove(path)


class Cleanup(BaseStep):
    """
    Remove boilerplate the generators leave behind.

    Never fails the run: problems are reported as a warning.
    """

    step_type = "cleanup"
    display_name = "Cleanup"

    async def run(self):
        files, folders = CLEANUP_RULES.get(self.config.framework, ((), ()))
        if not files and not folders:
            return

        await self.send_message("Cleaning up unnecessary files...")
        try:
            for file_name in files:
                path = join(self.project_dir, file_name)
                if lexists(path):
                    delete_path(path)
                    log.debug(f"Deleted {file_name}")

            for folder in folders:
                path = join(self.project_dir, folder)
                if not isdir(path):
                    continue
                for name in listdir(path):
                    delete_path(join(path, name))
                log.debug(f"Emptied {folder}")
        except OSError as err:
            log.warning(f"Cleanup failed: {err}", exc_info=True)
            await self.send_message("Warning: Some files could not be cleaned up")
            return

        await self.send_message("Cleanup complete")


__all__ = ["Cleanup"]
