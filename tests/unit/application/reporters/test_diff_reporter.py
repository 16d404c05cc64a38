"""Tests for DiffReporter.

Tests:
- construction contract (name required)
- memoized availability probe
- text vs binary eligibility (can_handle, can_report_on)
- dispatch: rate limiter gate, blocking bypass, empty approved file,
  argument order, options passthrough, consolidated output emission
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path

import pytest

from diffgate.application.reporters.diff_reporter import DiffReporter
from diffgate.domain.exceptions import ApprovalFileNotFoundError, MissingReporterNameError
from diffgate.domain.model.availability import Availability
from diffgate.domain.model.process_output import ProcessOutput
from tests.factories import (
    CountingExists,
    RecordingStrategy,
    StubLimiter,
    make_reporter,
    make_request,
)


@pytest.fixture
def text_file(tmp_path: Path) -> str:
    path = tmp_path / "a.received.txt"
    path.write_text("hello\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def binary_file(tmp_path: Path) -> str:
    path = tmp_path / "a.received.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    return str(path)


class TestConstruction:
    @pytest.mark.parametrize("name", ["", None])
    def test_name_required(self, name: str | None) -> None:
        with pytest.raises(MissingReporterNameError):
            DiffReporter(name)  # type: ignore[arg-type]

    def test_defaults(self) -> None:
        reporter = DiffReporter("meld")
        assert reporter.name == "meld"
        assert reporter.executable_path is None
        assert reporter.image_capable is False
        assert reporter.availability is Availability.UNKNOWN

    def test_from_command_resolves_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        tool = tmp_path / "fakediff"
        tool.write_text("#!/bin/sh\n")
        tool.chmod(0o755)
        monkeypatch.setenv("PATH", str(tmp_path))

        reporter = DiffReporter.from_command("fake", "fakediff", image_capable=True)

        assert reporter.executable_path is not None
        assert Path(reporter.executable_path).name == "fakediff"
        assert reporter.image_capable is True
        assert reporter.is_available() is True

    def test_from_command_unresolved(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATH", str(tmp_path))

        reporter = DiffReporter.from_command("fake", "definitely-not-installed")

        assert reporter.executable_path is None
        assert reporter.is_available() is False


class TestIsAvailable:
    def test_probe_runs_once(self) -> None:
        exists = CountingExists(result=True)
        reporter = make_reporter(exists=exists)

        assert reporter.is_available() is True
        assert reporter.is_available() is True
        assert exists.calls == 1
        assert reporter.availability is Availability.FOUND

    def test_not_found_is_permanent(self) -> None:
        exists = CountingExists(result=False)
        reporter = make_reporter(exists=exists)

        assert reporter.is_available() is False
        exists.result = True
        assert reporter.is_available() is False
        assert exists.calls == 1
        assert reporter.availability is Availability.NOT_FOUND

    def test_real_filesystem_not_reprobed(self, tmp_path: Path) -> None:
        exe = tmp_path / "tool"
        reporter = DiffReporter("tool", str(exe))

        assert reporter.is_available() is False
        exe.write_text("")
        assert reporter.is_available() is False

    def test_missing_executable_path(self) -> None:
        assert DiffReporter("tool").is_available() is False


class TestCanHandle:
    def test_text_only_reporter(self) -> None:
        reporter = make_reporter(image_capable=False)
        assert reporter.can_handle(is_binary=False) is True
        assert reporter.can_handle(is_binary=True) is False

    def test_image_capable_reporter(self) -> None:
        reporter = make_reporter(image_capable=True)
        assert reporter.can_handle(is_binary=False) is True
        assert reporter.can_handle(is_binary=True) is True


class TestCanReportOn:
    def test_text_file(self, text_file: str) -> None:
        assert make_reporter().can_report_on(text_file) is True

    def test_binary_file_rejected_without_image_diff(self, binary_file: str) -> None:
        assert make_reporter().can_report_on(binary_file) is False

    def test_image_capable_accepts_binary(self, binary_file: str) -> None:
        assert make_reporter(image_capable=True).can_report_on(binary_file) is True

    def test_image_capable_skips_probe(self, text_file: str) -> None:
        def probe(_path: str) -> bool:
            raise AssertionError("probe must not run")

        reporter = make_reporter(image_capable=True, binary_probe=probe)
        assert reporter.can_report_on(text_file) is True

    def test_unavailable_reporter(self, text_file: str) -> None:
        reporter = make_reporter(exists=CountingExists(result=False))
        assert reporter.can_report_on(text_file) is False

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        reporter = make_reporter()
        with pytest.raises(ApprovalFileNotFoundError):
            reporter.can_report_on(str(tmp_path / "missing.txt"))

    def test_missing_file_raises_even_if_unavailable(self, tmp_path: Path) -> None:
        exists = CountingExists(result=False)
        reporter = make_reporter(exists=exists)
        with pytest.raises(ApprovalFileNotFoundError):
            reporter.can_report_on(str(tmp_path / "missing.txt"))

    def test_probe_result_used(self, text_file: str) -> None:
        probed: list[str] = []

        def probe(path: str) -> bool:
            probed.append(path)
            return True

        reporter = make_reporter(binary_probe=probe)
        assert reporter.can_report_on(text_file) is False
        assert probed == [text_file]


class TestDispatchGate:
    def test_suppressed_background_launch_is_noop(self, tmp_path: Path) -> None:
        limiter = StubLimiter(suppress=True)
        background = RecordingStrategy()
        blocking = RecordingStrategy()
        reporter = make_reporter(limiter=limiter, background=background, blocking=blocking)
        approved = tmp_path / "a.approved.txt"

        result = reporter.dispatch(make_request(approved, tmp_path / "a.received.txt"))

        assert result is None
        assert background.launches == []
        assert blocking.launches == []
        assert not approved.exists()
        assert len(limiter.calls) == 1

    def test_limiter_receives_paths_and_options(self, tmp_path: Path) -> None:
        limiter = StubLimiter()
        reporter = make_reporter(limiter=limiter)
        approved = str(tmp_path / "a.approved.txt")
        received = str(tmp_path / "a.received.txt")

        reporter.dispatch(make_request(approved, received, process_options={"cwd": "/tmp"}))

        assert limiter.calls == [(approved, received, {"cwd": "/tmp"})]

    def test_allowed_background_launch(self, tmp_path: Path) -> None:
        background = RecordingStrategy()
        blocking = RecordingStrategy()
        reporter = make_reporter(background=background, blocking=blocking)

        handle = reporter.dispatch(
            make_request(tmp_path / "a.approved.txt", tmp_path / "a.received.txt")
        )

        assert handle is not None
        assert len(background.launches) == 1
        assert blocking.launches == []

    def test_blocking_launch_bypasses_limiter(self, tmp_path: Path) -> None:
        limiter = StubLimiter(suppress=True)
        background = RecordingStrategy()
        blocking = RecordingStrategy()
        reporter = make_reporter(limiter=limiter, background=background, blocking=blocking)

        handle = reporter.dispatch(
            make_request(
                tmp_path / "a.approved.txt",
                tmp_path / "a.received.txt",
                block_until_exit=True,
            )
        )

        assert handle is not None and handle.done
        assert limiter.calls == []
        assert len(blocking.launches) == 1
        assert background.launches == []


class TestDispatchLaunch:
    def test_missing_approved_file_created_before_spawn(self, tmp_path: Path) -> None:
        approved = tmp_path / "sub" / "a.approved.txt"
        blocking = RecordingStrategy(watch_path=str(approved))
        reporter = make_reporter(blocking=blocking)

        reporter.dispatch(make_request(approved, tmp_path / "a.received.txt", block_until_exit=True))

        assert blocking.launches[0].approved_existed is True
        assert approved.read_bytes() == b""

    def test_existing_approved_file_kept(self, tmp_path: Path) -> None:
        approved = tmp_path / "a.approved.txt"
        approved.write_text("baseline")
        reporter = make_reporter()

        reporter.dispatch(make_request(approved, tmp_path / "a.received.txt"))

        assert approved.read_text() == "baseline"

    def test_default_arguments_received_then_approved(self, tmp_path: Path) -> None:
        background = RecordingStrategy()
        reporter = make_reporter("meld", "/opt/meld", background=background)
        approved = str(tmp_path / "a.approved.txt")
        received = str(tmp_path / "a.received.txt")

        reporter.dispatch(make_request(approved, received))

        launch = background.launches[0]
        assert launch.executable == "/opt/meld"
        assert launch.arguments == (received, approved)

    def test_argument_override(self, tmp_path: Path) -> None:
        background = RecordingStrategy()
        reporter = make_reporter(background=background)

        reporter.dispatch(
            make_request(
                tmp_path / "a.approved.txt",
                tmp_path / "a.received.txt",
                argument_override=("--diff", "left", "right"),
            )
        )

        assert background.launches[0].arguments == ("--diff", "left", "right")

    def test_process_options_forwarded_unmodified(self, tmp_path: Path) -> None:
        background = RecordingStrategy()
        reporter = make_reporter(background=background)
        options = {"cwd": str(tmp_path), "env": {"A": "1"}}

        reporter.dispatch(
            make_request(
                tmp_path / "a.approved.txt",
                tmp_path / "a.received.txt",
                process_options=options,
            )
        )

        assert background.launches[0].options == options

    def test_command_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        reporter = make_reporter("meld", "/opt/meld")

        with caplog.at_level(logging.INFO, logger="diffgate"):
            reporter.dispatch(make_request(tmp_path / "a.approved.txt", tmp_path / "a.received.txt"))

        assert any(record.getMessage().startswith("CMD: /opt/meld ") for record in caplog.records)


class TestDispatchOutput:
    def _dispatch(self, tmp_path: Path, output: ProcessOutput, *, blocking: bool) -> str:
        sink = StringIO()
        strategy = RecordingStrategy(output=output)
        reporter = make_reporter(blocking=strategy, background=strategy, output=sink)
        reporter.dispatch(
            make_request(
                tmp_path / "a.approved.txt",
                tmp_path / "a.received.txt",
                block_until_exit=blocking,
            )
        )
        return sink.getvalue()

    @pytest.mark.parametrize("blocking", [True, False])
    def test_both_streams_emitted(self, tmp_path: Path, blocking: bool) -> None:
        text = self._dispatch(tmp_path, ProcessOutput(stdout="out", stderr="err"), blocking=blocking)

        assert text == (
            "\n============\nstdout:\n============\nout\n============\n"
            "\n============\nstderr:\n============\nerr\n============\n"
        )

    @pytest.mark.parametrize("blocking", [True, False])
    def test_empty_output_emits_nothing(self, tmp_path: Path, blocking: bool) -> None:
        assert self._dispatch(tmp_path, ProcessOutput(returncode=0), blocking=blocking) == ""

    def test_only_stderr(self, tmp_path: Path) -> None:
        text = self._dispatch(tmp_path, ProcessOutput(stderr="boom", returncode=1), blocking=True)

        assert "stderr:" in text
        assert "stdout:" not in text

    def test_empty_output_not_formatted(self, tmp_path: Path) -> None:
        class FailingFormatter:
            def format(self, output: ProcessOutput) -> str:
                raise AssertionError("formatter must not run for empty output")

        sink = StringIO()
        reporter = DiffReporter(
            "stub",
            "/usr/bin/stub",
            formatter=FailingFormatter(),
            output=sink,
            blocking=RecordingStrategy(output=ProcessOutput(returncode=0)),
        )

        reporter.dispatch(
            make_request(tmp_path / "a.approved.txt", tmp_path / "a.received.txt", block_until_exit=True)
        )

        assert sink.getvalue() == ""
