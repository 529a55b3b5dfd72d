import pytest

from create_ignite.steps.base import StepError, StepErrorCode
from create_ignite.steps.preflight import check_node_version, parse_node_version


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("v20.11.1\n", (20, 11, 1)),
        ("18.0.0", (18, 0, 0)),
        ("command not found", None),
        ("", None),
    ],
)
def test_parse_node_version(output, expected):
    assert parse_node_version(output) == expected


@pytest.mark.asyncio
async def test_supported_version(pm, exec_log):
    pm.run_command.side_effect = None
    pm.run_command.return_value = exec_log("node --version", stdout="v20.11.1\n")

    assert await check_node_version(pm, (16, 0, 0)) == "v20.11.1"
    pm.run_command.assert_awaited_once_with("node --version", show_output=False, timeout=30)


@pytest.mark.asyncio
async def test_version_too_low(pm, exec_log):
    pm.run_command.side_effect = None
    pm.run_command.return_value = exec_log("node --version", stdout="v14.21.3\n")

    with pytest.raises(StepError, match=r"Node.js version 16.0.0 or higher is required. Current version: v14.21.3"):
        await check_node_version(pm, (16, 0, 0))


@pytest.mark.asyncio
async def test_node_missing(pm, exec_log):
    pm.run_command.side_effect = None
    pm.run_command.return_value = exec_log("node --version", status_code=127, stderr="node: not found")

    with pytest.raises(StepError) as exc_info:
        await check_node_version(pm, (16, 0, 0))

    assert exc_info.value.code == StepErrorCode.NODE_VERSION_TOO_LOW
    assert "not installed" in exc_info.value.message
    assert exc_info.value.exec_log.status_code == 127
