"""Exceptions raised while installing a plugin."""
from pathlib import Path


class InstallError(Exception):
    """Base class for errors that abort an installation."""
    pass


class NotAProjectError(InstallError):
    """Raised when the target directory is not a Strapi project."""

    def __init__(self, root: Path):
        self.root = root
        super().__init__("This command can only be used inside a Strapi project.")


class AlreadyInstalledError(InstallError):
    """Raised when the install path is already taken."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"It looks like this plugin is already installed. Please check in `{path}`."
        )


class InstallFailedError(InstallError):
    """Raised when linking or moving the plugin sources fails."""

    def __init__(self, detail: str = ''):
        self.detail = detail
        super().__init__("An error occurred during plugin installation.")


class RegistryFetchError(InstallError):
    """Raised when the package manager could not fetch the plugin."""

    def __init__(self, package_id: str, hint_url: str, output: str = ''):
        self.package_id = package_id
        self.hint_url = hint_url
        self.output = output
        super().__init__(
            "An error occurred during plugin installation. \n"
            f"Please make sure this plugin is available on npm: {hint_url}"
        )


class ManifestError(Exception):
    """Raised when the admin plugins manifest cannot be read or written.

    Not an InstallError: the plugin stays installed when this happens.
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")
