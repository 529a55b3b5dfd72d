from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from create_ignite.proc.exec_log import ExecLog
from create_ignite.project.models import ProjectConfiguration
from create_ignite.project.options import Framework, ProjectType
from create_ignite.ui.base import UserInput


@pytest.fixture
def ui():
    """
    UI mock: records messages, answers questions with `ask_question.side_effect`.
    """
    return MagicMock(
        start=AsyncMock(return_value=True),
        stop=AsyncMock(),
        send_message=AsyncMock(),
        send_stream_chunk=AsyncMock(),
        ask_question=AsyncMock(return_value=UserInput(cancelled=True)),
    )


def make_exec_log(cmd: str = "true", status_code: int = 0, stdout: str = "", stderr: str = "") -> ExecLog:
    return ExecLog(
        duration=0.1,
        cmd=cmd,
        cwd=".",
        timeout=None,
        status_code=status_code,
        stdout=stdout,
        stderr=stderr,
    )


@pytest.fixture
def exec_log() -> Callable[..., ExecLog]:
    return make_exec_log


@pytest.fixture
def pm():
    """
    Process manager mock; every command succeeds unless the test says otherwise.
    """
    return MagicMock(run_command=AsyncMock(side_effect=lambda cmd, **kwargs: make_exec_log(cmd)))


@pytest.fixture
def project_config() -> Callable[..., ProjectConfiguration]:
    def make(**kwargs) -> ProjectConfiguration:
        values = {
            "project_name": "my-app",
            "project_type": ProjectType.FRONTEND,
            "framework": Framework.REACT,
        }
        values.update(kwargs)
        return ProjectConfiguration(**values)

    return make
