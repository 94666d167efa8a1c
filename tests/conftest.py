from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.fixtures.fakes import CallLog, make_toolchain  # noqa: E402

from pkgmkr.orchestrator import Toolchain  # noqa: E402


@pytest.fixture()
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture()
def toolchain(call_log: CallLog) -> Toolchain:
    """Toolchain whose collaborators only record what they were asked to do."""

    return make_toolchain(call_log)
