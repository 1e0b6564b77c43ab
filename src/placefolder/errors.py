"""Exception taxonomy for placefolder.

Library code raises these; only the CLI turns them into messages and
exit codes.
"""


class PlacefolderError(Exception):
    """Base class for every error the CLI reports and exits non-zero on."""


class ProjectNotFoundError(PlacefolderError, KeyError):
    """A referenced project name is not in the registry."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Project '{self.name}' not found"


class InvalidNameError(PlacefolderError, ValueError):
    """A project name is not acceptable (for example, empty)."""


class CorruptStateError(PlacefolderError, ValueError):
    """A registry document could not be parsed into a Registry."""


class ConfigLocationError(PlacefolderError):
    """The home directory (and so the registry location) cannot be resolved."""


class StorageError(PlacefolderError, OSError):
    """Reading or writing a registry file failed."""


class EditorLaunchError(PlacefolderError):
    """The editor process could not be started."""


class ScanRootError(PlacefolderError, NotADirectoryError):
    """The directory given to a scan does not exist or is not a directory."""
