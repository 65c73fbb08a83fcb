"""
Plugin installer.

Runs the install flow for one plugin:

1. check the target directory is a Strapi project
2. resolve the npm package id and install path
3. symlink a local checkout (development) or fetch from npm and relocate (registry)
4. register the plugin in the admin manifest

Manifest failures are logged but do not fail the install; the plugin stays on disk.
Concurrent installs into the same project are not guarded against.
"""
import asyncio
import logging
from pathlib import Path
from typing import Optional

from strapictl.config import Config
from strapictl.modules import acquire
from strapictl.modules.errors import ManifestError, NotAProjectError
from strapictl.modules.manifest import update_manifest
from strapictl.modules.models import InstallMode, ManifestUpdate, ResolvedPlugin
from strapictl.modules.project import is_valid_project
from strapictl.modules.resolver import resolve


class PluginInstaller:
    """Installs plugins into the Strapi project at ``root``."""

    def __init__(
        self,
        root: Path,
        packages_dir: Optional[Path] = None,
        runner: Optional[acquire.CommandRunner] = None,
        logger: Optional[logging.Logger] = None,
        prefix: str = None,
        tag: str = None,
        npm_bin: str = None,
        admin_url: str = None,
    ):
        self.root = Path(root)
        self.packages_dir = packages_dir
        self.runner = runner or acquire.run_command
        self.logger = logger or logging.getLogger(__name__)
        self.prefix = prefix if prefix is not None else Config.PLUGIN_PREFIX
        self.tag = tag or Config.PLUGIN_TAG
        self.npm_bin = npm_bin or Config.NPM_BIN
        self.admin_url = admin_url or Config.ADMIN_URL
        # Set by the last install(); None when the manifest step failed
        self.manifest_update: Optional[ManifestUpdate] = None

    def install(self, name: str, mode: InstallMode = InstallMode.REGISTRY) -> ResolvedPlugin:
        """Install plugin ``name``.

        Raises:
            NotAProjectError: root is not a Strapi project
            AlreadyInstalledError: plugins/<name> already exists
            InstallFailedError: symlink or move failed
            RegistryFetchError: npm could not fetch the package
        """
        if not is_valid_project(self.root):
            raise NotAProjectError(self.root)

        plugin = resolve(name, prefix=self.prefix)
        acquire.ensure_not_installed(self.root, plugin)

        self.logger.debug("Installation in progress...")

        if mode is InstallMode.DEVELOPMENT:
            acquire.link_local(self.root, plugin, self.packages_dir)
        else:
            self.logger.debug("Installing the plugin from npm registry.")
            asyncio.run(acquire.fetch_from_registry(
                self.root, plugin, runner=self.runner, npm_bin=self.npm_bin, tag=self.tag
            ))
            self.logger.debug("Plugin successfully installed from npm registry.")
            acquire.relocate(self.root, plugin)

        self.manifest_update = self.update_manifest(plugin)
        self.logger.info("The plugin has been successfully installed.")
        return plugin

    def update_manifest(self, plugin: ResolvedPlugin) -> Optional[ManifestUpdate]:
        """Register ``plugin`` in the admin manifest. Errors are logged, not raised."""
        try:
            result = update_manifest(self.root, plugin.entry_id, admin_url=self.admin_url)
        except ManifestError as e:
            self.logger.error(f"Impossible to update {e.path}: {e.reason}")
            return None

        self.logger.debug(
            f"Manifest updated for `{result.entry_id}` "
            f"(added={result.entry_added}, mirror={result.mirror.value})"
        )
        return result
