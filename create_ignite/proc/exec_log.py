from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class ExecLog(BaseModel):
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    duration: float = Field(description="The duration of the command run in seconds")
    cmd: str = Field(description="The full command (as executed in the shell)")
    cwd: str = Field(description="The working directory for the command")
    timeout: Optional[float] = Field(description="The command timeout in seconds (or None if no timeout)")
    status_code: Optional[int] = Field(description="The command return code, or None if there was a timeout")
    stdout: str = Field(description="The command standard output")
    stderr: str = Field(description="The command standard error")

    @property
    def success(self) -> bool:
        """Whether the command finished (in time) with a zero exit code."""
        return self.status_code == 0

    @property
    def output(self) -> str:
        """Combined output, stderr last, for error reports."""
        return "\n".join(part.strip() for part in (self.stdout, self.stderr) if part.strip())


__all__ = ["ExecLog"]
