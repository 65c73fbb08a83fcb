"""Getting plugin sources into the project's ``plugins`` directory.

Two ways are supported:

* development: symlink a sibling checkout of the plugin package
* registry: ``npm install`` the package, then move it out of ``node_modules``
"""
import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

from strapictl.config import Config
from strapictl.modules.errors import (
    AlreadyInstalledError,
    InstallFailedError,
    RegistryFetchError,
)
from strapictl.modules.models import ResolvedPlugin

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of an external command."""
    returncode: int
    stdout: str = ''
    stderr: str = ''


CommandRunner = Callable[[List[str], Path], Awaitable[CommandResult]]


def default_packages_dir() -> Path:
    """Directory holding sibling plugin checkouts for --dev installs."""
    if Config.PACKAGES_DIR:
        return Path(Config.PACKAGES_DIR).expanduser().resolve()
    # strapictl/modules/acquire.py -> the directory containing this checkout
    return Path(__file__).resolve().parents[3]


def ensure_not_installed(root: Path, plugin: ResolvedPlugin) -> None:
    """Raise AlreadyInstalledError if the install path is taken.

    A dangling symlink counts as taken.
    """
    target = Path(root) / plugin.install_path
    if os.path.lexists(target):
        raise AlreadyInstalledError(plugin.install_path)


def link_local(root: Path, plugin: ResolvedPlugin, packages_dir: Optional[Path] = None) -> Path:
    """Symlink ``<packages_dir>/<package_id>`` to the install path.

    Returns:
        Path: the created link
    """
    source = Path(packages_dir or default_packages_dir()) / plugin.package_id
    target = Path(root) / plugin.install_path
    logger.debug(f"Linking {source} -> {target}")

    if not source.is_dir():
        raise InstallFailedError(f"{source} is not a directory")

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(source.resolve(), target, target_is_directory=True)
    except OSError as e:
        raise InstallFailedError(str(e)) from e
    return target


async def run_command(cmd: List[str], cwd: Path) -> CommandResult:
    """Run ``cmd`` in ``cwd`` and wait for it to finish."""
    proc = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await proc.communicate()
    return CommandResult(
        returncode=proc.returncode,
        stdout=stdout.decode(errors='replace'),
        stderr=stderr.decode(errors='replace'),
    )


def npm_install_command(plugin: ResolvedPlugin, npm_bin: str = None, tag: str = None) -> List[str]:
    """Build the npm invocation; lifecycle scripts off, package.json untouched."""
    return [
        npm_bin or Config.NPM_BIN,
        'install',
        f"{plugin.package_id}@{tag or Config.PLUGIN_TAG}",
        '--ignore-scripts',
        '--no-save',
    ]


async def fetch_from_registry(
    root: Path,
    plugin: ResolvedPlugin,
    runner: CommandRunner = run_command,
    npm_bin: str = None,
    tag: str = None,
) -> CommandResult:
    """Download the plugin package into ``<root>/node_modules``.

    Raises:
        RegistryFetchError: if npm is missing or exits non-zero
    """
    cmd = npm_install_command(plugin, npm_bin=npm_bin, tag=tag)
    hint_url = f"{Config.REGISTRY_URL.rstrip('/')}/{plugin.package_id}"
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        result = await runner(cmd, Path(root))
    except OSError as e:
        raise RegistryFetchError(plugin.package_id, hint_url, output=str(e)) from e

    if result.returncode != 0:
        raise RegistryFetchError(
            plugin.package_id, hint_url, output=result.stderr or result.stdout
        )
    return result


def relocate(root: Path, plugin: ResolvedPlugin) -> Path:
    """Move ``node_modules/<package_id>`` to the install path."""
    source = Path(root) / 'node_modules' / plugin.package_id
    target = Path(root) / plugin.install_path
    logger.debug(f"Moving the `node_modules/{plugin.package_id}` folder to the `./plugins` folder.")

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        os.rename(source, target)
    except OSError as e:
        raise InstallFailedError(str(e)) from e
    return target
