"""Error types raised by the configuration engine.

Structural defaulting never raises. Only file I/O, site normalization and
migration validation surface errors, and they reach the caller unmodified.
"""

from enum import StrEnum


class ErrorStatus(StrEnum):
    """Machine-checkable status attached to a DendronError."""

    INVALID_CONFIG = "invalid_config"
    MISSING_HOOK_SCRIPT = "missing_hook_script"
    UNKNOWN_VERSION = "unknown_version"
    UNKNOWN = "unknown"


class ErrorSeverity(StrEnum):
    """How a caller should react to an error."""

    MINOR = "minor"  # warn and continue
    FATAL = "fatal"


class DendronError(Exception):
    """Base class for structured configuration errors."""

    def __init__(
        self,
        message: str,
        status: ErrorStatus = ErrorStatus.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.FATAL,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.severity = severity

    @property
    def is_minor(self) -> bool:
        """Whether the error can be reported without aborting."""
        return self.severity == ErrorSeverity.MINOR

    def to_dict(self) -> dict[str, str]:
        """Serialize the error for structured logging."""
        return {
            "message": self.message,
            "status": self.status.value,
            "severity": self.severity.value,
        }


class InvalidSiteConfigError(DendronError):
    """Site publishing config failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status=ErrorStatus.INVALID_CONFIG)


class MissingHookScriptError(DendronError):
    """A registered hook has no script on disk."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message, status=ErrorStatus.MISSING_HOOK_SCRIPT, severity=ErrorSeverity.MINOR
        )


class UnknownConfigVersionError(DendronError, ValueError):
    """No handler exists for a requested schema version."""

    def __init__(self, version: int) -> None:
        super().__init__(
            f"Unknown config version: {version}", status=ErrorStatus.UNKNOWN_VERSION
        )
        self.version = version


class InvalidConfigFileError(DendronError):
    """The config file does not hold a YAML mapping."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status=ErrorStatus.INVALID_CONFIG)


class ConfigValidationError(DendronError):
    """A config does not match the schema for its version."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            f"Configuration validation failed: {', '.join(errors)}",
            status=ErrorStatus.INVALID_CONFIG,
        )
        self.errors = errors
