import shutil
from os import listdir, makedirs, remove
from os.path import isdir, islink, join
from typing import Optional

from create_ignite.log import get_logger
from create_ignite.project.models import ProjectNameError, validate_project_name
from create_ignite.ui.base import UIBase, UIClosedError, ignite_source

log = get_logger(__name__)

CANCEL = "cancel"
DELETE = "delete"
RENAME = "rename"


def clear_folder(path: str):
    """
    Delete everything inside the folder, keeping the folder itself.

    :param path: Folder to clear.
    """
    for name in listdir(path):
        full_path = join(path, name)
        if isdir(full_path) and not islink(full_path):
            shutil.rmtree(full_path)
        else:
            remove(full_path)


async def ask_project_name(ui: UIBase, question: str = "Enter new project name:") -> str:
    """
    Ask for a project name until a valid one is given.

    :param ui: UI to ask with.
    :param question: Question to ask.
    :return: Valid project name.
    :raises UIClosedError: If the user cancels the question.
    """
    while True:
        answer = await ui.ask_question(question, allow_empty=False, source=ignite_source)
        if answer.cancelled:
            raise UIClosedError()

        try:
            return validate_project_name((answer.text or "").strip())
        except ProjectNameError as err:
            await ui.send_message(str(err), source=ignite_source)


async def confirm_empty_folder(ui: UIBase, root_dir: str, project_name: str) -> Optional[str]:
    """
    Make sure the project can be created in an empty (or new) folder.

    If `<root_dir>/<project_name>` exists and isn't empty, the user can
    cancel, delete the folder contents (after a second confirmation),
    or pick a different name (which is checked again).

    :param ui: UI to ask with.
    :param root_dir: Directory in which the project folder is created.
    :param project_name: Requested project name.
    :return: Project name to use, or None if the user cancelled.
    """
    while True:
        target = join(root_dir, project_name)
        if not isdir(target) or not listdir(target):
            return project_name

        files = listdir(target)
        await ui.send_message(
            "\n".join(
                [
                    f'Folder "{project_name}" already exists and is not empty',
                    f"   Path: {target}",
                    f"   Files: {len(files)} items found",
                ]
            ),
            source=ignite_source,
        )

        answer = await ui.ask_question(
            "How would you like to proceed?",
            buttons={
                CANCEL: "Cancel setup",
                DELETE: "Delete all files and continue",
                RENAME: "Use a different name",
            },
            default=CANCEL,
            buttons_only=True,
            source=ignite_source,
        )

        if answer.cancelled or answer.button == CANCEL:
            return None

        if answer.button == RENAME:
            project_name = await ask_project_name(ui)
            continue

        confirm = await ui.ask_question(
            "Are you absolutely sure? This cannot be undone!",
            buttons={"yes": "Yes", "no": "No"},
            default="no",
            buttons_only=True,
            source=ignite_source,
        )
        if confirm.cancelled or confirm.button != "yes":
            return None

        await ui.send_message("Cleaning folder...", source=ignite_source)
        log.info(f"Deleting contents of {target}")
        clear_folder(target)
        makedirs(target, exist_ok=True)
        await ui.send_message(f"Folder cleaned: {project_name}", source=ignite_source)
        return project_name


__all__ = ["clear_folder", "ask_project_name", "confirm_empty_folder"]
