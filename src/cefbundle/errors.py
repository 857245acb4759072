"""Exception hierarchy for cefbundle.

Every fatal condition of the bundling pipeline is raised as a subclass of
BundleError so the CLI can map it to an exit code in one place. Per-file
problems (a missing runtime file, a failed compression) are not exceptions;
the stages report them as typed results instead.
"""


class BundleError(Exception):
    """Base class for fatal bundling errors."""

    exit_code = 1


class ConfigurationError(BundleError):
    """Raised when the resolved configuration is incomplete or invalid."""

    pass


class SourceRootError(BundleError):
    """Raised when the CEF runtime source directory is missing or unusable."""

    pass


class BuildError(BundleError):
    """Raised when the native build reports failure.

    Carries the exit code of the build process so it can be propagated. A
    process killed by signal N (negative return code) maps to 128 + N, as a
    shell reports it.
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        if exit_code < 0:
            exit_code = 128 - exit_code
        self.exit_code = exit_code if exit_code else 1


class ExecutableNotFoundError(BundleError):
    """Raised when a build succeeded but the expected executable is absent."""

    pass


class MaterializationError(BundleError):
    """Raised when the build output directory cannot be prepared."""

    pass


class RelocationError(BundleError):
    """Raised when the final output directory cannot be prepared."""

    pass
