import re
from os.path import basename, isdir, isfile, join
from typing import Optional

from create_ignite.config import ROOT_DIR

GIT_DIR_PATH = join(ROOT_DIR, ".git")
SETUP_VERSION_PATTERN = re.compile(r'^\s*VERSION\s*=\s*"(.*)"\s*(#.*)?$')


def get_git_commit() -> Optional[str]:
    """
    Return the current git commit (if running from a repo).

    :return: commit hash or None if not running from a git repo
    """

    if not isdir(GIT_DIR_PATH):
        return None

    git_head = join(GIT_DIR_PATH, "HEAD")
    if not isfile(git_head):
        return None

    with open(git_head, "r", encoding="utf-8") as f:
        ref = f.read().strip()

    # Direct reference to commit hash
    if not ref.startswith("ref: "):
        return ref

    ref_path = join(GIT_DIR_PATH, ref[5:])

    # Dangling reference, return the reference name
    if not isfile(ref_path):
        return basename(ref_path)

    with open(ref_path, "r", encoding="utf-8") as f:
        return f.read().strip()


def get_package_version() -> str:
    """
    Get package version as defined in setup.py.

    If not found, returns "0.0.0".

    :return: package version as defined in setup.py
    """
    UNKNOWN = "0.0.0"

    setup_path = join(ROOT_DIR, "setup.py")
    if not isfile(setup_path):
        return UNKNOWN

    with open(setup_path, "r", encoding="utf-8") as fp:
        for line in fp:
            m = SETUP_VERSION_PATTERN.match(line)
            if m:
                return m.group(1)

    return UNKNOWN


def get_version() -> str:
    """
    Find and return the current version of create-ignite.

    The version string is built from the package version and the current
    git commit hash (if running from a git repo).

    Example: 0.1.0-gitbf01c19

    :return: version string
    """

    version = get_package_version()
    commit = get_git_commit()
    if commit:
        version = version + "-git" + commit[:7]

    return version


__all__ = ["get_version"]
