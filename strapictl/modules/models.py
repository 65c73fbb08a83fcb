"""
Data models for plugin installation.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class InstallMode(Enum):
    """How the plugin sources end up in the project."""
    DEVELOPMENT = 'development'  # symlink to a local checkout
    REGISTRY = 'registry'        # npm fetch, then move out of node_modules


class MirrorOutcome(Enum):
    """What happened to the build copy of the manifest."""
    REPLACED = 'replaced'  # stale copy deleted before copying
    CREATED = 'created'    # nothing to delete


@dataclass(frozen=True)
class ResolvedPlugin:
    """A plugin name mapped onto its package id and install location."""
    name: str
    package_id: str
    install_path: Path  # relative to the project root
    prefix: str = ''

    @property
    def entry_id(self) -> str:
        """Identifier used in the admin manifest."""
        if self.prefix and self.package_id.startswith(self.prefix):
            return self.package_id[len(self.prefix):]
        return self.package_id


@dataclass
class ManifestUpdate:
    """Result of patching the admin plugins manifest."""
    entry_id: str
    entry_added: bool
    created: bool
    mirror: MirrorOutcome
