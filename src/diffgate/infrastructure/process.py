"""Process launch strategies: blocking and background.

Both strategies share one contract (LaunchStrategyProtocol): run a command,
hand fully buffered stdout/stderr to on_finished exactly once, then complete
the handle. Output is never streamed to the caller mid-flight.

A child that cannot be started (missing executable, permission denied) is
not an error here: the OSError text becomes the captured stderr.
"""

from __future__ import annotations

import subprocess
import threading
from typing import IO, TYPE_CHECKING

from diffgate.domain.model.launch_handle import LaunchHandle
from diffgate.domain.model.process_output import ProcessOutput

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

CHUNK_SIZE = 4096


def decode_output(data: bytes | str | None) -> str:
    """Decode captured stream. Invalid UTF-8 replaced, never raises."""
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


class BlockingLaunch:
    """Synchronous launch: returns once the child exited.

    Output is available immediately, fully formed.
    """

    def launch(
        self,
        executable: str,
        arguments: Sequence[str],
        options: Mapping[str, object],
        on_finished: Callable[[ProcessOutput], None],
    ) -> LaunchHandle:
        """Run executable to completion and report its output."""
        try:
            result = subprocess.run(
                [executable, *arguments],
                capture_output=True,
                check=False,
                **options,
            )
        except OSError as exc:
            output = ProcessOutput(stderr=str(exc))
        else:
            output = ProcessOutput(
                stdout=decode_output(result.stdout),
                stderr=decode_output(result.stderr),
                returncode=result.returncode,
            )

        on_finished(output)
        return LaunchHandle.completed(output)


class BackgroundLaunch:
    """Asynchronous launch: returns immediately.

    One reader thread per pipe accumulates chunks as they arrive.
    A finisher thread waits for both pipes to close and the child to exit,
    calls on_finished, then completes the handle.

    Threads are daemons: a viewer window left open does not keep the test
    process alive.
    """

    def launch(
        self,
        executable: str,
        arguments: Sequence[str],
        options: Mapping[str, object],
        on_finished: Callable[[ProcessOutput], None],
    ) -> LaunchHandle:
        """Start executable and report its output when it terminates."""
        handle = LaunchHandle()

        try:
            process = subprocess.Popen(
                [executable, *arguments],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                **options,
            )
        except OSError as exc:
            output = ProcessOutput(stderr=str(exc))
            on_finished(output)
            handle.complete(output)
            return handle

        stdout_chunks: list[bytes | str] = []
        stderr_chunks: list[bytes | str] = []
        readers = (
            _start_reader(process.stdout, stdout_chunks),
            _start_reader(process.stderr, stderr_chunks),
        )

        def _finish() -> None:
            for reader in readers:
                reader.join()
            returncode = process.wait()
            output = ProcessOutput(
                stdout=_join_chunks(stdout_chunks),
                stderr=_join_chunks(stderr_chunks),
                returncode=returncode,
            )
            try:
                on_finished(output)
            finally:
                handle.complete(output)

        threading.Thread(target=_finish, name="diffgate-finish", daemon=True).start()
        return handle


def _start_reader(stream: IO[bytes] | IO[str] | None, chunks: list[bytes | str]) -> threading.Thread:
    """Pump stream into chunks until EOF."""

    def _pump() -> None:
        if stream is None:
            return
        with stream:
            while True:
                chunk = stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                chunks.append(chunk)

    reader = threading.Thread(target=_pump, name="diffgate-reader", daemon=True)
    reader.start()
    return reader


def _join_chunks(chunks: list[bytes | str]) -> str:
    """Concatenate chunks and decode once (multibyte characters may span chunks)."""
    if not chunks:
        return ""
    if isinstance(chunks[0], str):
        return "".join(str(c) for c in chunks)
    return decode_output(b"".join(bytes(c) for c in chunks))
