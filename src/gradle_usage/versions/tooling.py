"""Gradle version probe that talks to the build tool itself.

Each probe opens a ``GradleConnection`` scoped to one project directory.
The connection launches the project's wrapper script (or a ``gradle``
executable on ``PATH``) with ``--version`` and parses the build
environment Gradle announces::

    ------------------------------------------------------------
    Gradle 7.4.2
    ------------------------------------------------------------
    ...
    JVM:          11.0.13 (Eclipse Adoptium 11.0.13+8)

Connections are never reused. The child process is killed and reaped when
the connection closes, whatever the outcome.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
import threading
from pathlib import Path
from types import TracebackType

from gradle_usage.exceptions import ProbeError
from gradle_usage.versions.probe import BuildEnvironment, VersionProbe

logger = logging.getLogger(__name__)

# Seconds allowed for one ``gradle --version`` run, daemon start-up and
# distribution download included.
DEFAULT_TIMEOUT: float = 120.0

_GRADLE_VERSION_RE = re.compile(r"^Gradle\s+(\S+)\s*$", re.MULTILINE)
_JVM_RE = re.compile(r"^JVM:\s+(.+?)\s*$", re.MULTILINE)


def parse_version_output(output: str) -> BuildEnvironment:
    """Parse the output of ``gradle --version``.

    Raises:
        ProbeError: If no ``Gradle <version>`` line is present.
    """
    match = _GRADLE_VERSION_RE.search(output)
    if match is None:
        raise ProbeError("No Gradle version found in output")
    jvm = _JVM_RE.search(output)
    return BuildEnvironment(
        gradle_version=match.group(1),
        jvm_version=jvm.group(1) if jvm else None,
    )


def find_gradle_command(project_dir: Path) -> list[str]:
    """Pick the command used to start Gradle for ``project_dir``.

    The project's own wrapper script wins; a ``gradle`` executable on
    ``PATH`` is the fallback.

    Raises:
        ProbeError: If neither is available.
    """
    script = project_dir / ("gradlew.bat" if os.name == "nt" else "gradlew")
    if script.is_file():
        if os.name != "nt" and not os.access(script, os.X_OK):
            return ["sh", str(script)]
        return [str(script)]
    gradle = shutil.which("gradle")
    if gradle:
        return [gradle]
    raise ProbeError(f"No Gradle wrapper script or gradle executable for {project_dir}")


class GradleConnection:
    """A one-shot connection to Gradle for a single project directory.

    Use it as a context manager so the Gradle process never outlives it::

        with GradleConnection(project_dir, ["./gradlew"]) as connection:
            env = connection.get_build_environment()
    """

    def __init__(
        self,
        project_dir: Path,
        command: list[str],
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.project_dir = project_dir
        self.command = list(command)
        self.timeout = timeout
        self._process: subprocess.Popen[str] | None = None

    def __enter__(self) -> GradleConnection:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._process is not None and self._process.poll() is None

    def connect(self) -> None:
        """Start the Gradle process.

        Raises:
            ProbeError: If the process cannot be started.
        """
        args = [*self.command, "--version"]
        logger.debug("Connecting to Gradle in %s: %s", self.project_dir, " ".join(args))
        try:
            self._process = subprocess.Popen(
                args,
                cwd=self.project_dir,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as exc:
            raise ProbeError(f"Cannot start Gradle in {self.project_dir}: {exc}") from exc

    def get_build_environment(self) -> BuildEnvironment:
        """Wait for Gradle and return the build environment it reports.

        Raises:
            ProbeError: On timeout, a non-zero exit, or unparsable output.
        """
        if self._process is None:
            raise ProbeError("Connection is not open")
        try:
            output, _ = self._process.communicate(timeout=self.timeout)
        except subprocess.TimeoutExpired as exc:
            raise ProbeError(
                f"Gradle did not answer within {self.timeout:g}s in {self.project_dir}"
            ) from exc

        if self._process.returncode != 0:
            lines = [line for line in (output or "").splitlines() if line.strip()]
            detail = lines[-1] if lines else "no output"
            raise ProbeError(
                f"Gradle exited with code {self._process.returncode} "
                f"in {self.project_dir}: {detail}"
            )
        return parse_version_output(output or "")

    def abort(self) -> None:
        """Kill the Gradle process without waiting for it."""
        process = self._process
        if process is not None and process.poll() is None:
            process.kill()

    def close(self) -> None:
        """Kill the Gradle process if it is still running and reap it."""
        process = self._process
        if process is None:
            return
        if process.poll() is None:
            process.kill()
        process.wait()
        if process.stdout is not None:
            process.stdout.close()
        self._process = None


class GradleToolingProbe(VersionProbe):
    """Resolve versions by asking each project's Gradle for its version.

    Args:
        timeout: Seconds allowed per project before the probe fails.
        gradle_command: Fixed command to start Gradle with, instead of
            the project's wrapper script.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        gradle_command: list[str] | None = None,
    ) -> None:
        self.timeout = timeout
        self.gradle_command = gradle_command
        self._connections: set[GradleConnection] = set()
        self._lock = threading.Lock()
        self._cancelled = threading.Event()

    @property
    def name(self) -> str:
        return "tooling"

    def connect(self, project_dir: Path) -> GradleConnection:
        """Create an unopened connection for ``project_dir``."""
        command = self.gradle_command or find_gradle_command(project_dir)
        return GradleConnection(project_dir, command, timeout=self.timeout)

    def probe(self, project_dir: Path) -> str:
        if self._cancelled.is_set():
            raise ProbeError("Version probing was cancelled")
        connection = self.connect(project_dir)
        with self._lock:
            self._connections.add(connection)
        try:
            with connection:
                if self._cancelled.is_set():
                    raise ProbeError("Version probing was cancelled")
                return connection.get_build_environment().gradle_version
        finally:
            with self._lock:
                self._connections.discard(connection)

    def cancel(self) -> None:
        self._cancelled.set()
        with self._lock:
            connections = list(self._connections)
        for connection in connections:
            connection.abort()
        if connections:
            logger.debug("Aborted %d in-flight Gradle connection(s)", len(connections))
