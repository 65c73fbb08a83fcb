"""
Plugin installation modules.
"""
from .errors import (
    AlreadyInstalledError,
    InstallError,
    InstallFailedError,
    ManifestError,
    NotAProjectError,
    RegistryFetchError,
)
from .installer import PluginInstaller
from .models import InstallMode, ManifestUpdate, MirrorOutcome, ResolvedPlugin
from .resolver import resolve

__all__ = [
    'AlreadyInstalledError',
    'InstallError',
    'InstallFailedError',
    'InstallMode',
    'ManifestError',
    'ManifestUpdate',
    'MirrorOutcome',
    'NotAProjectError',
    'PluginInstaller',
    'RegistryFetchError',
    'ResolvedPlugin',
    'resolve',
]
