"""Launch strategy port: run a command, report its output once finished."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from diffgate.domain.model.launch_handle import LaunchHandle
    from diffgate.domain.model.process_output import ProcessOutput


class LaunchStrategyProtocol(Protocol):
    """Contract for blocking and background process launchers.

    on_finished is called exactly once with fully buffered output,
    before the returned handle reports done.
    """

    def launch(
        self,
        executable: str,
        arguments: Sequence[str],
        options: Mapping[str, object],
        on_finished: Callable[[ProcessOutput], None],
    ) -> LaunchHandle:
        """Start executable with arguments.

        Args:
            executable: Path of the program to run.
            arguments: Ordered argument list.
            options: Keyword arguments forwarded verbatim to the spawn primitive.
            on_finished: Receives captured output once the process ended.

        Returns:
            Handle completed after on_finished returned.
        """
        ...
