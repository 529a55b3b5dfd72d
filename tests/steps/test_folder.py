import pytest

from create_ignite.steps.folder import ask_project_name, clear_folder, confirm_empty_folder
from create_ignite.ui.base import UIClosedError, UserInput


def make_project(root, name="my-app"):
    project = root / name
    (project / "src").mkdir(parents=True)
    (project / "src" / "index.js").write_text("")
    (project / "README.md").write_text("")
    return project


def test_clear_folder(tmp_path):
    project = make_project(tmp_path)

    clear_folder(str(project))

    assert project.is_dir()
    assert list(project.iterdir()) == []


@pytest.mark.asyncio
async def test_ask_project_name_retries_invalid(ui):
    ui.ask_question.side_effect = [UserInput(text="bad name"), UserInput(text=""), UserInput(text=" good-name ")]

    assert await ask_project_name(ui) == "good-name"
    messages = [call.args[0] for call in ui.send_message.call_args_list]
    assert messages == [
        "Project name can only contain letters, numbers, dashes, and underscores",
        "Project name is required",
    ]


@pytest.mark.asyncio
async def test_ask_project_name_cancelled(ui):
    with pytest.raises(UIClosedError):
        await ask_project_name(ui)


@pytest.mark.asyncio
async def test_missing_folder_is_fine(ui, tmp_path):
    assert await confirm_empty_folder(ui, str(tmp_path), "my-app") == "my-app"
    ui.ask_question.assert_not_called()


@pytest.mark.asyncio
async def test_empty_folder_is_fine(ui, tmp_path):
    (tmp_path / "my-app").mkdir()
    assert await confirm_empty_folder(ui, str(tmp_path), "my-app") == "my-app"
    ui.ask_question.assert_not_called()


@pytest.mark.asyncio
async def test_non_empty_folder_cancel(ui, tmp_path):
    project = make_project(tmp_path)
    ui.ask_question.return_value = UserInput(button="cancel")

    assert await confirm_empty_folder(ui, str(tmp_path), "my-app") is None
    assert (project / "README.md").exists()
    assert "2 items found" in ui.send_message.call_args.args[0]


@pytest.mark.asyncio
async def test_non_empty_folder_delete(ui, tmp_path):
    project = make_project(tmp_path)
    ui.ask_question.side_effect = [UserInput(button="delete"), UserInput(button="yes")]

    assert await confirm_empty_folder(ui, str(tmp_path), "my-app") == "my-app"
    assert project.is_dir()
    assert list(project.iterdir()) == []


@pytest.mark.asyncio
async def test_non_empty_folder_delete_not_confirmed(ui, tmp_path):
    project = make_project(tmp_path)
    ui.ask_question.side_effect = [UserInput(button="delete"), UserInput(button="no")]

    assert await confirm_empty_folder(ui, str(tmp_path), "my-app") is None
    assert (project / "src" / "index.js").exists()


@pytest.mark.asyncio
async def test_non_empty_folder_rename(ui, tmp_path):
    make_project(tmp_path)
    make_project(tmp_path, "second")
    ui.ask_question.side_effect = [
        UserInput(button="rename"),
        UserInput(text="second"),
        UserInput(button="rename"),
        UserInput(text="third"),
    ]

    assert await confirm_empty_folder(ui, str(tmp_path), "my-app") == "third"
