"""Collaborators that drive external command line tools."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from ..errors import AdapterError
from ..interfaces import DocSiteBuilder, VersionControl
from ..templates import PKGDOWN_TEMPLATE
from .local import append_unique_lines

__all__ = ["GitVersionControl", "PkgdownSiteBuilder", "run_command"]


LOGGER = logging.getLogger(__name__)


def run_command(
    command: Sequence[str],
    cwd: Path,
    *,
    timeout_seconds: float,
) -> subprocess.CompletedProcess[str]:
    """Run ``command`` inside ``cwd`` and raise :class:`AdapterError` on failure."""

    printable = " ".join(command)
    LOGGER.debug("running %s in %s", printable, cwd)
    try:
        return subprocess.run(
            list(command),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
            timeout=timeout_seconds,
        )
    except FileNotFoundError as error:
        raise AdapterError(f"executable '{command[0]}' was not found in PATH") from error
    except subprocess.TimeoutExpired as error:
        raise AdapterError(f"command timed out after {timeout_seconds}s: {printable}") from error
    except subprocess.CalledProcessError as error:
        details = (error.stderr or "").strip() or (error.stdout or "").strip() or "no command output"
        LOGGER.error("command failed (%s): %s\n%s", error.returncode, printable, details)
        raise AdapterError(f"command failed ({error.returncode}): {printable}\n{details}") from error


class GitVersionControl(VersionControl):
    """Local repositories through ``git`` and hosted ones through ``gh``."""

    def __init__(
        self,
        *,
        git_executable: str = "git",
        gh_executable: str = "gh",
        private: bool = False,
        timeout_seconds: float = 120.0,
    ) -> None:
        self._git = git_executable
        self._gh = gh_executable
        self._private = private
        self._timeout_seconds = timeout_seconds

    def init(self, path: Path) -> None:
        self._git_command(path, "init")

    def commit(self, path: Path, message: str) -> None:
        self._git_command(path, "add", "--all")
        self._git_command(path, "commit", "--message", message)

    def configure(self, path: Path, username: Optional[str], email: Optional[str]) -> None:
        if username:
            self._git_command(path, "config", "--local", "user.name", username)
        if email:
            self._git_command(path, "config", "--local", "user.email", email)

    def create_remote(self, path: Path) -> None:
        visibility = "--private" if self._private else "--public"
        run_command(
            [
                self._gh,
                "repo",
                "create",
                path.name,
                visibility,
                "--source",
                str(path),
                "--remote",
                "origin",
                "--push",
            ],
            cwd=path,
            timeout_seconds=self._timeout_seconds,
        )

    def _git_command(self, path: Path, *args: str) -> None:
        run_command([self._git, *args], cwd=path, timeout_seconds=self._timeout_seconds)


class PkgdownSiteBuilder(DocSiteBuilder):
    """Configure and render a pkgdown site with ``Rscript``."""

    def __init__(self, *, rscript_executable: str = "Rscript", timeout_seconds: float = 600.0) -> None:
        self._rscript = rscript_executable
        self._timeout_seconds = timeout_seconds

    def setup(self, path: Path) -> None:
        config = path / "_pkgdown.yml"
        if not config.exists():
            config.write_text(PKGDOWN_TEMPLATE, encoding="utf-8")
        append_unique_lines(path / ".Rbuildignore", ["^_pkgdown\\.yml$", "^docs$", "^pkgdown$"])
        append_unique_lines(path / ".gitignore", ["docs"])

    def build(self, path: Path) -> None:
        run_command(
            [self._rscript, "-e", "pkgdown::build_site(preview = FALSE)"],
            cwd=path,
            timeout_seconds=self._timeout_seconds,
        )
