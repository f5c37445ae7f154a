"""Custom exception definitions for the plugin compatibility hooks."""

from typing import Any


class PluginCompatError(Exception):
    """Base exception for all plugin compatibility hook errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class BuildExecutionError(PluginCompatError):
    """Exception raised when a Maven invocation fails."""

    def __init__(
        self,
        message: str,
        goals: list[str] | None = None,
        working_dir: str | None = None,
        log_file: str | None = None,
        return_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize build execution error.

        Args:
            message: Error message.
            goals: Goals passed to Maven.
            working_dir: Directory Maven ran in.
            log_file: File the build output was written to.
            return_code: Exit code of the Maven process.
            details: Additional error details.
        """
        details = details or {}
        if goals:
            details["goals"] = goals
        if working_dir:
            details["working_dir"] = working_dir
        if log_file:
            details["log_file"] = log_file
        if return_code is not None:
            details["return_code"] = return_code
        super().__init__(message, details)
        self.return_code = return_code


class ResourceError(PluginCompatError):
    """Exception raised for filesystem failures while staging a build."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize resource error.

        Args:
            message: Error message.
            path: File or directory involved.
            details: Additional error details.
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class ConfigurationError(PluginCompatError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)


class ModuleResolutionError(ConfigurationError):
    """Exception raised when a plugin's Maven module cannot be determined."""

    def __init__(
        self,
        message: str,
        plugin_name: str | None = None,
        plugin_dir: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize module resolution error.

        Args:
            message: Error message.
            plugin_name: Name of the plugin being compiled.
            plugin_dir: Directory of the plugin being compiled.
            details: Additional error details.
        """
        details = details or {}
        if plugin_name:
            details["plugin_name"] = plugin_name
        if plugin_dir:
            details["plugin_dir"] = plugin_dir
        super().__init__(message, details=details)
