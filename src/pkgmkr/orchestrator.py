"""Package creation state machine.

A run validates its inputs, checks that the target path is free, and then
walks an ordered list of steps. Each step has a policy in
:data:`STEP_POLICIES`: a failing ``HARD`` step aborts the run, a failing
``SOFT`` step is reported as a :class:`~pkgmkr.errors.StepWarning` and the run
continues with the next step.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .adapters import (
    CranNameAvailability,
    DescriptionMetadataWriter,
    GitVersionControl,
    LocalLicenseWriter,
    LocalReadmeWriter,
    LocalSkeletonGenerator,
    PkgdownSiteBuilder,
)
from .errors import (
    CreationFailed,
    DirectoryExists,
    MetadataWriteFailed,
    SkeletonCreationFailed,
    StepWarning,
    ValidationError,
)
from .interfaces import (
    DocSiteBuilder,
    LicenseWriter,
    MetadataWriter,
    NameAvailability,
    ReadmeWriter,
    SkeletonGenerator,
    VersionControl,
)
from .schema import CreationResult, PackageRequest

__all__ = [
    "CreationState",
    "PackageOrchestrator",
    "STEP_POLICIES",
    "Step",
    "StepPolicy",
    "Toolchain",
    "create_package",
]


LOGGER = logging.getLogger(__name__)

DEFAULT_COMMIT_MESSAGE = "Initial commit"


class CreationState(str, Enum):
    VALIDATING = "validating"
    DIRECTORY_CHECKED = "directory_checked"
    NAME_CHECK_REQUESTED = "name_check_requested"
    SKELETON_CREATED = "skeleton_created"
    METADATA_WRITTEN = "metadata_written"
    README_WRITTEN = "readme_written"
    LICENSE_WRITTEN = "license_written"
    VERSION_CONTROL_SETUP = "version_control_setup"
    DOC_SITE_BUILT = "doc_site_built"
    COMPLETED = "completed"
    ABORTED = "aborted"


class StepPolicy(str, Enum):
    HARD = "hard"
    SOFT = "soft"


class Step(str, Enum):
    NAME_CHECK = "name availability check"
    SKELETON = "skeleton creation"
    METADATA = "metadata write"
    README = "README"
    LICENSE = "license"
    VERSION_CONTROL = "version control"
    REMOTE_REPOSITORY = "remote repository creation"
    DOC_SITE = "documentation site"


STEP_POLICIES: dict[Step, StepPolicy] = {
    Step.NAME_CHECK: StepPolicy.SOFT,
    Step.SKELETON: StepPolicy.HARD,
    Step.METADATA: StepPolicy.HARD,
    Step.README: StepPolicy.SOFT,
    Step.LICENSE: StepPolicy.SOFT,
    Step.VERSION_CONTROL: StepPolicy.SOFT,
    Step.REMOTE_REPOSITORY: StepPolicy.SOFT,
    Step.DOC_SITE: StepPolicy.SOFT,
}

# State entered once the step succeeds.
STEP_STATES: dict[Step, CreationState] = {
    Step.NAME_CHECK: CreationState.NAME_CHECK_REQUESTED,
    Step.SKELETON: CreationState.SKELETON_CREATED,
    Step.METADATA: CreationState.METADATA_WRITTEN,
    Step.README: CreationState.README_WRITTEN,
    Step.LICENSE: CreationState.LICENSE_WRITTEN,
    Step.VERSION_CONTROL: CreationState.VERSION_CONTROL_SETUP,
    Step.REMOTE_REPOSITORY: CreationState.VERSION_CONTROL_SETUP,
    Step.DOC_SITE: CreationState.DOC_SITE_BUILT,
}

# A step only runs once its prerequisite has succeeded.
STEP_REQUIRES: dict[Step, Step] = {
    Step.REMOTE_REPOSITORY: Step.VERSION_CONTROL,
}

_HARD_ERRORS: dict[Step, type[CreationFailed]] = {
    Step.SKELETON: SkeletonCreationFailed,
    Step.METADATA: MetadataWriteFailed,
}


@dataclass(slots=True)
class Toolchain:
    """The collaborators a run drives; any of them may be substituted."""

    skeleton: SkeletonGenerator = field(default_factory=LocalSkeletonGenerator)
    metadata: MetadataWriter = field(default_factory=DescriptionMetadataWriter)
    readme: ReadmeWriter = field(default_factory=LocalReadmeWriter)
    license: LicenseWriter = field(default_factory=LocalLicenseWriter)
    version_control: VersionControl = field(default_factory=GitVersionControl)
    doc_site: DocSiteBuilder = field(default_factory=PkgdownSiteBuilder)
    name_availability: NameAvailability = field(default_factory=CranNameAvailability)


class PackageOrchestrator:
    """Drive one package creation at a time through :class:`CreationState`."""

    def __init__(
        self,
        toolchain: Toolchain | None = None,
        *,
        commit_message: str = DEFAULT_COMMIT_MESSAGE,
    ) -> None:
        self._toolchain = toolchain or Toolchain()
        self._commit_message = commit_message
        self._warnings: list[str] = []
        self.history: list[CreationState] = []

    @property
    def state(self) -> CreationState | None:
        """The most recent state of the current or last run."""

        return self.history[-1] if self.history else None

    def create(
        self,
        path: str | Path | None,
        author: str | None,
        email: Optional[str] = None,
        *,
        git: bool = True,
        git_username: Optional[str] = None,
        git_email: Optional[str] = None,
        readme_md: bool = True,
        check_pkg_name: bool = True,
        license: str = "MIT",
        pkgdown: bool = True,
    ) -> CreationResult:
        """Validate the inputs and create the package they describe."""

        self.history = [CreationState.VALIDATING]
        try:
            request = PackageRequest.build(
                path,
                author,
                email,
                license=license,
                git=git,
                git_username=git_username,
                git_email=git_email,
                readme_md=readme_md,
                check_pkg_name=check_pkg_name,
                pkgdown=pkgdown,
            )
        except ValidationError as error:
            LOGGER.error("validation failed: %s", error)
            self._transition(CreationState.ABORTED)
            raise
        return self.run(request)

    def run(self, request: PackageRequest) -> CreationResult:
        """Execute every enabled step for an already validated ``request``."""

        if self.state is not CreationState.VALIDATING:
            self.history = [CreationState.VALIDATING]
        self._warnings = []

        if request.path.exists():
            LOGGER.error("refusing to overwrite %s", request.path)
            self._transition(CreationState.ABORTED)
            raise DirectoryExists(request.path)
        self._transition(CreationState.DIRECTORY_CHECKED)

        completed: set[Step] = set()
        for step, enabled, action in self._plan(request):
            if not enabled:
                continue
            prerequisite = STEP_REQUIRES.get(step)
            if prerequisite is not None and prerequisite not in completed:
                LOGGER.info("skipping %s: %s did not complete", step.value, prerequisite.value)
                continue
            if self._execute(step, action, request):
                completed.add(step)

        self._transition(CreationState.COMPLETED)
        LOGGER.info("package %s created at %s", request.package_name, request.path)
        return CreationResult(
            path=request.path,
            package_name=request.package_name,
            success=True,
            warnings=list(self._warnings),
        )

    def _plan(
        self, request: PackageRequest
    ) -> list[tuple[Step, bool, Callable[[PackageRequest], None]]]:
        tools = self._toolchain
        return [
            (Step.NAME_CHECK, request.check_pkg_name, self._check_name),
            (Step.SKELETON, True, lambda r: tools.skeleton.create(r.path)),
            (
                Step.METADATA,
                True,
                lambda r: tools.metadata.set_author(r.path, r.author_given, r.author_family, r.email),
            ),
            (Step.README, request.readme_md, lambda r: tools.readme.create(r.path)),
            (Step.LICENSE, True, lambda r: tools.license.apply(r.license.value, r.author, r.path)),
            (Step.VERSION_CONTROL, request.git, self._setup_version_control),
            (Step.REMOTE_REPOSITORY, request.git, lambda r: tools.version_control.create_remote(r.path)),
            (Step.DOC_SITE, request.pkgdown, self._build_doc_site),
        ]

    def _execute(
        self,
        step: Step,
        action: Callable[[PackageRequest], None],
        request: PackageRequest,
    ) -> bool:
        LOGGER.info("%s: running %s", request.package_name, step.value)
        try:
            action(request)
        except Exception as error:
            if STEP_POLICIES[step] is StepPolicy.HARD:
                LOGGER.error("%s: %s failed: %s", request.package_name, step.value, error)
                self._transition(CreationState.ABORTED)
                raise _HARD_ERRORS[step](request.package_name, error) from error
            self._warn(step, error)
            return False
        self._transition(STEP_STATES[step])
        return True

    def _check_name(self, request: PackageRequest) -> None:
        if not self._toolchain.name_availability.check(request.package_name):
            self._warn(Step.NAME_CHECK, f"package name '{request.package_name}' is already taken")

    def _setup_version_control(self, request: PackageRequest) -> None:
        version_control = self._toolchain.version_control
        version_control.init(request.path)
        # The identity has to be in place before the first commit is authored.
        if request.git_username or request.git_email:
            version_control.configure(request.path, request.git_username, request.git_email)
        version_control.commit(request.path, self._commit_message)

    def _build_doc_site(self, request: PackageRequest) -> None:
        self._toolchain.doc_site.setup(request.path)
        self._toolchain.doc_site.build(request.path)

    def _warn(self, step: Step, cause: BaseException | str) -> None:
        warning = StepWarning(step.value, cause)
        LOGGER.warning("%s", warning)
        self._warnings.append(str(warning))
        warnings.warn(warning, stacklevel=3)

    def _transition(self, state: CreationState) -> None:
        if self.history and self.history[-1] is state:
            return
        LOGGER.debug("state %s -> %s", self.state.value if self.state else None, state.value)
        self.history.append(state)


def create_package(
    path: str | Path | None,
    author: str | None,
    email: Optional[str] = None,
    *,
    git: bool = True,
    git_username: Optional[str] = None,
    git_email: Optional[str] = None,
    readme_md: bool = True,
    check_pkg_name: bool = True,
    license: str = "MIT",
    pkgdown: bool = True,
    toolchain: Toolchain | None = None,
) -> CreationResult:
    """Create a package at ``path`` authored by ``author``.

    Validation errors, an existing target, and failures while writing the
    skeleton or the author metadata raise; every other failing step is
    downgraded to a :class:`~pkgmkr.errors.StepWarning` listed on the result.
    """

    orchestrator = PackageOrchestrator(toolchain)
    return orchestrator.create(
        path,
        author,
        email,
        git=git,
        git_username=git_username,
        git_email=git_email,
        readme_md=readme_md,
        check_pkg_name=check_pkg_name,
        license=license,
        pkgdown=pkgdown,
    )
