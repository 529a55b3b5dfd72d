from unittest.mock import patch

from create_ignite.config.version import get_git_commit, get_package_version, get_version


def test_get_package_version(tmp_path):
    (tmp_path / "setup.py").write_text('from setuptools import setup\n\nVERSION = "1.4.2"  # release\n')

    with patch("create_ignite.config.version.ROOT_DIR", str(tmp_path)):
        assert get_package_version() == "1.4.2"


def test_get_package_version_unknown(tmp_path):
    with patch("create_ignite.config.version.ROOT_DIR", str(tmp_path)):
        assert get_package_version() == "0.0.0"


def test_get_git_commit_detached(tmp_path):
    (tmp_path / "HEAD").write_text("0123456789abcdef\n")

    with patch("create_ignite.config.version.GIT_DIR_PATH", str(tmp_path)):
        assert get_git_commit() == "0123456789abcdef"


def test_get_git_commit_branch(tmp_path):
    (tmp_path / "HEAD").write_text("ref: refs/heads/main\n")
    (tmp_path / "refs" / "heads").mkdir(parents=True)
    (tmp_path / "refs" / "heads" / "main").write_text("fedcba9876543210\n")

    with patch("create_ignite.config.version.GIT_DIR_PATH", str(tmp_path)):
        assert get_git_commit() == "fedcba9876543210"


def test_get_git_commit_no_repo(tmp_path):
    with patch("create_ignite.config.version.GIT_DIR_PATH", str(tmp_path / ".git")):
        assert get_git_commit() is None


@patch("create_ignite.config.version.get_git_commit", return_value="abc")
@patch("create_ignite.config.version.get_package_version", return_value="1.2.3")
def test_get_version(_mock_get_package_version, _mock_get_git_commit):
    version = get_version()
    assert version == "1.2.3-gitabc"


@patch("create_ignite.config.version.get_git_commit", return_value=None)
@patch("create_ignite.config.version.get_package_version", return_value="1.2.3")
def test_get_version_without_git(_mock_get_package_version, _mock_get_git_commit):
    assert get_version() == "1.2.3"
