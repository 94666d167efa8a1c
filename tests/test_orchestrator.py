from __future__ import annotations

from pathlib import Path

import pytest

from pkgmkr.errors import (
    DirectoryExists,
    InvalidEmail,
    MetadataWriteFailed,
    SkeletonCreationFailed,
    StepWarning,
)
from pkgmkr.orchestrator import (
    STEP_POLICIES,
    CreationState,
    PackageOrchestrator,
    Step,
    StepPolicy,
    Toolchain,
    create_package,
)
from tests.fixtures.fakes import CallLog, make_toolchain


def _create(toolchain: Toolchain, path: Path, **options):
    defaults = {"email": "jane@example.com", "git": False, "pkgdown": False, "check_pkg_name": False}
    defaults.update(options)
    return create_package(path, "Jane Doe", toolchain=toolchain, **defaults)


def test_only_skeleton_and_metadata_are_hard():
    hard = {step for step, policy in STEP_POLICIES.items() if policy is StepPolicy.HARD}
    assert hard == {Step.SKELETON, Step.METADATA}
    assert set(STEP_POLICIES) == set(Step)


def test_all_steps_run_in_order(tmp_path: Path, toolchain: Toolchain, call_log: CallLog):
    target = tmp_path / "testpkg"
    result = create_package(
        target,
        "Jane Doe",
        "jane@example.com",
        git_username="jdoe",
        git_email="jdoe@example.com",
        toolchain=toolchain,
    )

    assert result.success is True
    assert result.package_name == "testpkg"
    assert result.path == target.resolve()
    assert result.warnings == []
    assert call_log.names == [
        "name.check",
        "skeleton.create",
        "metadata.set_author",
        "readme.create",
        "license.apply",
        "vcs.init",
        "vcs.configure",
        "vcs.commit",
        "vcs.create_remote",
        "docs.setup",
        "docs.build",
    ]


def test_metadata_receives_parsed_author(tmp_path: Path, toolchain: Toolchain, call_log: CallLog):
    create_package(
        tmp_path / "testmulti",
        "Mary Jane Smith Wilson",
        "mary@example.com",
        git=False,
        pkgdown=False,
        check_pkg_name=False,
        toolchain=toolchain,
    )

    metadata_call = next(call for call in call_log.calls if call[0] == "metadata.set_author")
    assert metadata_call[2:] == ("Mary", "Jane Smith Wilson", "mary@example.com")
    license_call = next(call for call in call_log.calls if call[0] == "license.apply")
    assert license_call[1:3] == ("MIT", "Mary Jane Smith Wilson")


def test_disabled_steps_are_skipped(tmp_path: Path, toolchain: Toolchain, call_log: CallLog):
    _create(toolchain, tmp_path / "testpkg", readme_md=False)

    assert call_log.names == ["skeleton.create", "metadata.set_author", "license.apply"]


def test_configure_skipped_without_identity(tmp_path: Path, toolchain: Toolchain, call_log: CallLog):
    _create(toolchain, tmp_path / "testpkg", git=True)

    assert "vcs.init" in call_log.names
    assert "vcs.configure" not in call_log.names
    assert "vcs.commit" in call_log.names
    assert "vcs.create_remote" in call_log.names


def test_validation_failure_aborts_before_any_call(tmp_path: Path, toolchain: Toolchain, call_log: CallLog):
    orchestrator = PackageOrchestrator(toolchain)

    with pytest.raises(InvalidEmail):
        orchestrator.create(tmp_path / "testpkg", "Jane Doe", "not-an-email")

    assert call_log.calls == []
    assert orchestrator.history == [CreationState.VALIDATING, CreationState.ABORTED]
    assert not (tmp_path / "testpkg").exists()


def test_existing_directory_aborts(tmp_path: Path, toolchain: Toolchain, call_log: CallLog):
    target = tmp_path / "existingpkg"
    target.mkdir()
    orchestrator = PackageOrchestrator(toolchain)

    with pytest.raises(DirectoryExists, match="already exists"):
        orchestrator.create(target, "Jane Doe", check_pkg_name=True)

    assert call_log.calls == []
    assert orchestrator.state is CreationState.ABORTED


def test_skeleton_failure_is_hard(tmp_path: Path, call_log: CallLog):
    call_log.failures.add("skeleton.create")
    orchestrator = PackageOrchestrator(make_toolchain(call_log))

    with pytest.raises(SkeletonCreationFailed) as excinfo:
        orchestrator.create(tmp_path / "testpkg", "Jane Doe", git=False, pkgdown=False, check_pkg_name=False)

    assert excinfo.value.package_name == "testpkg"
    assert "skeleton.create exploded" in str(excinfo.value)
    assert "removed manually" in str(excinfo.value)
    assert call_log.names == ["skeleton.create"]
    assert orchestrator.state is CreationState.ABORTED


def test_metadata_failure_is_hard(tmp_path: Path, call_log: CallLog):
    call_log.failures.add("metadata.set_author")

    with pytest.raises(MetadataWriteFailed, match="testpkg"):
        _create(make_toolchain(call_log), tmp_path / "testpkg")

    assert call_log.names == ["skeleton.create", "metadata.set_author"]


@pytest.mark.parametrize(
    "failing, step",
    [
        ("readme.create", Step.README),
        ("license.apply", Step.LICENSE),
        ("docs.build", Step.DOC_SITE),
        ("name.check", Step.NAME_CHECK),
    ],
)
def test_optional_step_failures_become_warnings(tmp_path: Path, call_log: CallLog, failing: str, step: Step):
    call_log.failures.add(failing)

    with pytest.warns(StepWarning, match=step.value):
        result = _create(make_toolchain(call_log), tmp_path / "testpkg", pkgdown=True, check_pkg_name=True)

    assert result.success is True
    assert len(result.warnings) == 1
    assert failing in result.warnings[0]
    # every later step still ran
    assert call_log.names[-1] == "docs.build"


def test_remote_failure_only_warns(tmp_path: Path, call_log: CallLog):
    call_log.failures.add("vcs.create_remote")

    with pytest.warns(StepWarning, match="remote repository creation"):
        result = _create(make_toolchain(call_log), tmp_path / "testpkg", git=True, pkgdown=True)

    assert result.success is True
    assert result.warnings == ["remote repository creation step failed: vcs.create_remote exploded"]
    assert call_log.names[-2:] == ["docs.setup", "docs.build"]


def test_local_init_failure_skips_remote(tmp_path: Path, call_log: CallLog):
    call_log.failures.add("vcs.init")

    with pytest.warns(StepWarning, match="version control"):
        result = _create(make_toolchain(call_log), tmp_path / "testpkg", git=True, git_username="jdoe")

    assert result.success is True
    assert len(result.warnings) == 1
    assert "vcs.configure" not in call_log.names
    assert "vcs.commit" not in call_log.names
    assert "vcs.create_remote" not in call_log.names


def test_taken_name_is_reported(tmp_path: Path, call_log: CallLog):
    toolchain = make_toolchain(call_log, name_available=False)

    with pytest.warns(StepWarning, match="already taken"):
        result = _create(toolchain, tmp_path / "testpkg", check_pkg_name=True)

    assert result.success is True
    assert "skeleton.create" in call_log.names


def test_history_follows_completed_steps(tmp_path: Path, toolchain: Toolchain):
    orchestrator = PackageOrchestrator(toolchain)
    orchestrator.create(tmp_path / "testpkg", "Jane Doe", check_pkg_name=False)

    assert orchestrator.history == [
        CreationState.VALIDATING,
        CreationState.DIRECTORY_CHECKED,
        CreationState.SKELETON_CREATED,
        CreationState.METADATA_WRITTEN,
        CreationState.README_WRITTEN,
        CreationState.LICENSE_WRITTEN,
        CreationState.VERSION_CONTROL_SETUP,
        CreationState.DOC_SITE_BUILT,
        CreationState.COMPLETED,
    ]


def test_commit_message_is_configurable(tmp_path: Path, toolchain: Toolchain, call_log: CallLog):
    orchestrator = PackageOrchestrator(toolchain, commit_message="Scaffold package")
    orchestrator.create(tmp_path / "testpkg", "Jane Doe", pkgdown=False, check_pkg_name=False)

    commit_call = next(call for call in call_log.calls if call[0] == "vcs.commit")
    assert commit_call[2] == "Scaffold package"


def test_identity_is_configured_before_the_commit(tmp_path: Path, toolchain: Toolchain, call_log: CallLog):
    _create(toolchain, tmp_path / "testpkg", git=True, git_username="jdoe", git_email="jdoe@example.com")

    vcs_calls = [name for name in call_log.names if name.startswith("vcs.")]
    assert vcs_calls == ["vcs.init", "vcs.configure", "vcs.commit", "vcs.create_remote"]


def test_commit_failure_skips_remote(tmp_path: Path, call_log: CallLog):
    call_log.failures.add("vcs.commit")

    with pytest.warns(StepWarning, match="version control"):
        result = _create(make_toolchain(call_log), tmp_path / "testpkg", git=True)

    assert result.success is True
    assert "vcs.create_remote" not in call_log.names
