import asyncio
import signal
import sys
import time
from copy import deepcopy
from dataclasses import dataclass
from os import environ
from os.path import abspath, join
from typing import Awaitable, Callable, Optional

import psutil

from create_ignite.log import get_logger
from create_ignite.proc.exec_log import ExecLog

log = get_logger(__name__)

NONBLOCK_READ_TIMEOUT = 0.01
BUSY_WAIT_INTERVAL = 0.1
DEFAULT_COMMAND_TIMEOUT = 600.0

OutputHandler = Callable[[str, str], Awaitable[None]]


@dataclass
class LocalProcess:
    cmd: str
    cwd: str
    env: dict[str, str]
    stdout: str
    stderr: str
    _process: asyncio.subprocess.Process

    @staticmethod
    async def start(cmd: str, *, cwd: str = ".", env: dict[str, str]) -> "LocalProcess":
        log.debug(f"Starting process: {cmd} (cwd={cwd})")
        _process = await asyncio.create_subprocess_shell(
            cmd,
            cwd=cwd,
            env=env,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        return LocalProcess(
            cmd=cmd,
            cwd=cwd,
            env=env,
            stdout="",
            stderr="",
            _process=_process,
        )

    async def wait(self, timeout: Optional[float] = None) -> int:
        try:
            future = self._process.wait()
            if timeout:
                future = asyncio.wait_for(future, timeout)
            retcode = await future
        except asyncio.TimeoutError:
            log.debug(f"Process {self.cmd} still running after {timeout}s, terminating")
            await self.terminate()
            retcode = await self._process.wait()

        return retcode

    @staticmethod
    async def _nonblock_read(reader: asyncio.StreamReader, timeout: float) -> str:
        """
        Read whatever is available from the stream, waiting at most `timeout`
        for each chunk so the event loop isn't blocked for long.

        :param reader: Async stream reader to read from.
        :param timeout: Timeout for a single read (should be short).
        :return: Data read from the stream, or empty string.
        """
        buffer = ""
        while True:
            try:
                data = await asyncio.wait_for(reader.read(1024), timeout)
            except asyncio.TimeoutError:
                return buffer
            if not data:
                return buffer
            buffer += data.decode("utf-8", errors="ignore")

    async def read_output(self, timeout: float = NONBLOCK_READ_TIMEOUT) -> tuple[str, str]:
        new_stdout = await self._nonblock_read(self._process.stdout, timeout)
        new_stderr = await self._nonblock_read(self._process.stderr, timeout)
        self.stdout += new_stdout
        self.stderr += new_stderr
        return (new_stdout, new_stderr)

    async def _terminate_process_tree(self, sig: int):
        # npm/npx spawn child processes of their own
        try:
            shell_process = psutil.Process(self._process.pid)
        except psutil.NoSuchProcess:
            return

        processes = shell_process.children(recursive=True)
        processes.append(shell_process)
        for proc in processes:
            try:
                proc.send_signal(sig)
            except psutil.NoSuchProcess:
                pass

        psutil.wait_procs(processes, timeout=1)

    async def terminate(self, kill: bool = True):
        if kill and sys.platform != "win32":
            await self._terminate_process_tree(signal.SIGKILL)
        else:
            # Windows doesn't have SIGKILL
            await self._terminate_process_tree(signal.SIGTERM)

    @property
    def is_running(self) -> bool:
        if self._process.returncode is not None:
            return False
        try:
            proc = psutil.Process(self._process.pid)
            return proc.is_running() and proc.status() != psutil.STATUS_ZOMBIE
        except psutil.NoSuchProcess:
            return False

    @property
    def pid(self) -> int:
        return self._process.pid


class ProcessManager:
    """
    Run external commands (package managers, scaffolding tools, git).

    Commands are run through the shell, relative to `root_dir`, and their
    output is relayed to `output_handler` as it arrives.

    :param root_dir: Directory relative to which command working directories are resolved.
    :param env: Environment for the commands (default: copy of the current environment).
    :param output_handler: Optional async callback receiving (stdout, stderr) chunks.
    """

    def __init__(
        self,
        *,
        root_dir: str,
        env: Optional[dict[str, str]] = None,
        output_handler: Optional[OutputHandler] = None,
    ):
        if env is None:
            env = deepcopy(dict(environ))
        self.default_env = env
        self.root_dir = root_dir
        self.output_handler = output_handler

    async def run_command(
        self,
        cmd: str,
        *,
        cwd: str = ".",
        env: Optional[dict[str, str]] = None,
        timeout: float = DEFAULT_COMMAND_TIMEOUT,
        show_output: bool = True,
    ) -> ExecLog:
        """
        Run command and wait for it to finish.

        Status code in the returned log is the process exit code, or
        None if the process timed out and was terminated.

        :param cmd: Command to run.
        :param cwd: Working directory (relative to `root_dir`).
        :param env: Additional environment variables.
        :param timeout: Timeout in seconds.
        :param show_output: Relay output to the output handler.
        :return: Execution log of the command.
        """
        env = {**self.default_env, **(env or {})}
        abs_cwd = abspath(join(self.root_dir, cwd))
        terminated = False

        started_at = time.time()
        process = await LocalProcess.start(cmd, cwd=abs_cwd, env=env)

        while process.is_running and (time.time() - started_at) < timeout:
            out, err = await process.read_output(BUSY_WAIT_INTERVAL)
            if self.output_handler and (out or err) and show_output:
                await self.output_handler(out, err)

        if process.is_running:
            log.debug(f"Process {cmd} still running after {timeout}s, terminating")
            await process.terminate()
            terminated = True

        await process.wait()

        out, err = await process.read_output()
        if self.output_handler and (out or err) and show_output:
            await self.output_handler(out, err)

        status_code = None if terminated else (process._process.returncode or 0)
        duration = time.time() - started_at
        log.debug(f"Process {cmd} (cwd={abs_cwd}) finished with status {status_code} in {duration:.1f}s")

        return ExecLog(
            duration=duration,
            cmd=cmd,
            cwd=abs_cwd,
            timeout=timeout,
            status_code=status_code,
            stdout=process.stdout,
            stderr=process.stderr,
        )


__all__ = ["LocalProcess", "ProcessManager"]
