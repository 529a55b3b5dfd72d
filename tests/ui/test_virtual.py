import pytest

from create_ignite.ui.base import UserInput, ignite_source
from create_ignite.ui.virtual import VirtualUI


@pytest.mark.asyncio
async def test_scripted_inputs_are_used_in_order():
    ui = VirtualUI([{"text": "my-app"}, {"button": "vue"}])

    assert await ui.ask_question("Name?") == UserInput(text="my-app")
    assert await ui.ask_question("Framework?", buttons={"react": "React", "vue": "Vue"}) == UserInput(button="vue")


@pytest.mark.asyncio
async def test_fallback_to_default():
    ui = VirtualUI([])

    answer = await ui.ask_question("Framework?", buttons={"react": "React", "vue": "Vue"}, default="vue")
    assert answer.button == "vue"

    answer = await ui.ask_question("Name?", default="app")
    assert answer.text == "app"


@pytest.mark.asyncio
async def test_fallback_to_first_button():
    ui = VirtualUI([])
    answer = await ui.ask_question("Framework?", buttons={"react": "React", "vue": "Vue"})
    assert answer.button == "react"


@pytest.mark.asyncio
async def test_fallback_to_empty_text():
    ui = VirtualUI([])
    assert (await ui.ask_question("Name?")).text == ""


@pytest.mark.asyncio
async def test_messages_are_printed(capsys):
    ui = VirtualUI([])
    assert await ui.start() is True

    await ui.send_message("Hello", source=ignite_source)
    await ui.send_stream_chunk("partial")
    await ui.send_stream_chunk(None)
    await ui.stop()

    assert capsys.readouterr().out == "[Ignite] Hello\npartial\n"
