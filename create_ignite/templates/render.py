import os
from os import walk
from os.path import dirname, join, relpath
from pathlib import Path
from typing import Any, Callable, Optional

from jinja2 import Environment, FileSystemLoader

from create_ignite.log import get_logger

log = get_logger(__name__)

TEMPLATE_DIR = join(dirname(__file__), "tree")


def json_string(value: str) -> str:
    """
    Escape a string for use inside a double-quoted JSON/JS string literal

    :param value: The string to escape
    :return: The escaped string
    """
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class Renderer:
    """
    Render Jinja templates from the bundled template tree

    * `render_template` renders a single template
    * `render_tree` renders all templates under a folder of the tree
    * `write_tree` renders a folder and writes the files to disk

    Usage:

    >>> r = Renderer()
    >>> output_string = r.render_template('files/App.vue', {'css_framework': 'tailwind'})
    >>> output_tree = r.render_tree('backend', {'project_name': 'my-api'})
    """

    def __init__(self, template_dir: str = TEMPLATE_DIR):
        self.template_dir = template_dir
        self.jinja_env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=False,
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["json_string"] = json_string

    def render_template(self, template: str, context: Any) -> str:
        """
        Render a single template to a string using provided context

        :param template: Name of the template file, relative to `template_dir`.
        :param context: Context to render the template with.
        :return: The resulting string.
        """

        # Jinja2 always uses /, even on Windows
        template = template.replace("\\", "/")

        tpl_object = self.jinja_env.get_template(template)
        return tpl_object.render(context)

    def render_tree(
        self,
        root: str,
        context: Any,
        filter: Optional[Callable[[str], Optional[str]]] = None,
    ) -> dict[str, str]:
        """
        Render a tree folder structure of templates using provided context

        :param root: Root of the tree (relative to `template_dir`).
        :param context: Context to render the templates with.
        :param filter: If defined, called for each file (path relative to
            the tree root) to decide whether to render it and where to
            put it. Returning None or an empty string skips the file.
        :return: A flat dictionary with path => content structure.

        Files rendering to an empty string are left out. Directories are
        implied by file paths.
        """

        retval = {}
        full_root = join(self.template_dir, root)

        for path, subdirs, files in walk(full_root):
            for file in sorted(files):
                file_path = join(path, file)
                output_location = Path(file_path).relative_to(full_root).as_posix()
                tpl_location = relpath(file_path, self.template_dir)

                if filter:
                    output_location = filter(output_location)
                    if not output_location:
                        continue

                contents = self.render_template(tpl_location, context)
                if contents != "":
                    retval[output_location] = contents

        return retval

    def write_tree(
        self,
        root: str,
        context: Any,
        target_dir: str,
        filter: Optional[Callable[[str], Optional[str]]] = None,
    ) -> list[str]:
        """
        Render a tree (see `render_tree`) and write the files under `target_dir`.

        :return: List of written file paths, relative to `target_dir`.
        """
        files = self.render_tree(root, context, filter)
        for file_name, contents in files.items():
            full_path = join(target_dir, file_name)
            os.makedirs(dirname(full_path), exist_ok=True)
            with open(full_path, "w", encoding="utf-8", newline="\n") as fp:
                fp.write(contents)
            log.debug(f"Wrote {file_name}")
        return list(files)


__all__ = ["Renderer", "TEMPLATE_DIR"]
