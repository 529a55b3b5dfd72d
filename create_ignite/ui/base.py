from typing import Optional

from pydantic import BaseModel


class UIClosedError(Exception):
    """The user interface has been closed (user interrupted the prompt)."""


class UISource:
    """
    Source for UI messages.

    See also: `StepSource`

    Attributes:
    * `display_name`: Human-readable name of the source.
    * `type_name`: Type name of the source.
    """

    display_name: str
    type_name: str

    def __init__(self, display_name: str, type_name: str):
        """
        Create a new UI source.

        :param display_name: Human-readable name of the source.
        :param type_name: Type name of the source.
        """
        self.display_name = display_name
        self.type_name = type_name

    def __str__(self) -> str:
        return self.display_name


class StepSource(UISource):
    """
    Orchestration step UI source.

    Attributes:
    * `display_name`: Human-readable name of the step (eg. "Installer").
    * `type_name`: Type of the step (eg. "step:installer").
    """

    def __init__(self, display_name: str, step_type: str):
        """
        Create a new step source.

        :param display_name: Human-readable name of the step.
        :param step_type: Type of the step.
        """
        super().__init__(display_name, f"step:{step_type}")


class UserInput(BaseModel):
    """
    Represents user input.

    See also: `UIBase.ask_question()`

    Attributes:
    * `text`: User-provided text (if any).
    * `button`: Name (key) of the button the user selected (if any).
    * `cancelled`: Whether the user cancelled the input.
    """

    text: Optional[str] = None
    button: Optional[str] = None
    cancelled: bool = False


class UIBase:
    """
    Base class for UI adapters.
    """

    async def start(self) -> bool:
        """
        Start the UI adapter.

        :return: Whether the UI was started successfully.
        """
        raise NotImplementedError()

    async def stop(self):
        """
        Stop the UI adapter.
        """
        raise NotImplementedError()

    async def send_stream_chunk(self, chunk: Optional[str], *, source: Optional[UISource] = None):
        """
        Send a chunk of the stream to the UI.

        Used to relay output of external commands as it arrives.
        A `None` chunk marks the end of the stream.

        :param chunk: Chunk of the stream.
        :param source: Source of the stream (if any).
        """
        raise NotImplementedError()

    async def send_message(self, message: str, *, source: Optional[UISource] = None):
        """
        Send a complete message to the UI.

        :param message: Message content.
        :param source: Source of the message (if any).
        """
        raise NotImplementedError()

    async def ask_question(
        self,
        question: str,
        *,
        buttons: Optional[dict[str, str]] = None,
        default: Optional[str] = None,
        buttons_only: bool = False,
        allow_empty: bool = False,
        source: Optional[UISource] = None,
    ) -> UserInput:
        """
        Ask the user a question.

        If buttons are provided, the UI should use the item values
        as button labels, and item keys as the values to return.

        After the user answers, constructs a `UserInput` object
        with the selected button or text. If the user cancels
        the input, the `cancelled` attribute should be set to True.

        :param question: Question to ask.
        :param buttons: Buttons to display (if any).
        :param default: Default value (if user provides no input).
        :param buttons_only: Whether to only show buttons (disallow custom text).
        :param allow_empty: Whether to allow empty input.
        :param source: Source of the question (if any).
        :return: User input.
        """
        raise NotImplementedError()


ignite_source = UISource("Ignite", "ignite")
success_source = UISource("Congratulations", "success")


__all__ = [
    "UIClosedError",
    "UISource",
    "StepSource",
    "UserInput",
    "UIBase",
    "ignite_source",
    "success_source",
]
