import pytest

from create_ignite.steps.summary import SuccessSummary
from create_ignite.ui.base import success_source


def test_links(ui, pm, project_config, tmp_path):
    config = project_config(framework="vue", css_framework="tailwind", state_management="pinia")
    links = SuccessSummary(config, ui, pm, root_dir=str(tmp_path)).links

    assert [name for name, _ in links] == ["Vue", "Vite", "Tailwind CSS", "Pinia"]


def test_tips(ui, pm, project_config, tmp_path):
    config = project_config(css_framework="tailwind", package_manager="pnpm", install_prettier=False)
    tips = SuccessSummary(config, ui, pm, root_dir=str(tmp_path)).tips

    assert tips == [
        "Use React DevTools browser extension for debugging",
        "Use Tailwind CSS IntelliSense VSCode extension",
        "Run 'pnpm lint' to check code quality",
        "Check package.json for all available scripts",
        "Read the documentation links above to get started",
    ]


@pytest.mark.asyncio
async def test_summary_message(ui, pm, project_config, tmp_path):
    config = project_config(framework="nextjs", state_management="redux", git_init=False)

    await SuccessSummary(config, ui, pm, root_dir=str(tmp_path)).run()

    ui.send_message.assert_awaited_once()
    summary = ui.send_message.call_args.args[0]
    assert ui.send_message.call_args.kwargs["source"] is success_source
    assert summary.startswith("SUCCESS! Your project is ready!")
    assert "   Name:         my-app" in summary
    assert "   Framework:    nextjs" in summary
    assert "   State Mgmt:   redux" in summary
    assert "   Git:          Not initialized" in summary
    assert "   1. cd my-app" in summary
    assert "   2. npm run dev" in summary
    assert "npm run preview" in summary
    assert "   * Next.js: https://nextjs.org/docs" in summary
    assert "   * Redux Toolkit: https://redux-toolkit.js.org/" in summary


def test_backend_summary_has_no_preview(ui, pm, project_config, tmp_path):
    config = project_config(project_type="backend", framework="express", language="js")
    summary = SuccessSummary(config, ui, pm, root_dir=str(tmp_path)).render()

    assert "preview" not in summary
    assert "   Language:     JavaScript" in summary
    assert "   * Express: https://expressjs.com/" in summary
