import asyncio
import subprocess


class ServeProcess:
    """Handle on the `ollama serve` subprocess. Terminated at most once."""

    def __init__(self, process, command):
        self.process = process
        self.command = command
        self._terminated = False

    @classmethod
    async def start(cls, command):
        """Launch the model server with inherited stdout/stderr. Raises OSError on failure."""
        process = await asyncio.create_subprocess_exec(
            *command,
            stdin=subprocess.DEVNULL,
        )
        print(f"  [serve] started `{' '.join(command)}` (pid {process.pid})")
        return cls(process, command)

    @property
    def terminated(self):
        return self._terminated

    async def terminate(self):
        """Best-effort kill. Repeated calls and already-exited processes are no-ops."""
        if self._terminated:
            return
        self._terminated = True
        if self.process.returncode is not None:
            return
        try:
            self.process.kill()
            await self.process.wait()
        except (ProcessLookupError, OSError) as e:
            print(f"  [serve] kill failed, ignoring: {e}")
