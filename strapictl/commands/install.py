import logging
from pathlib import Path
from typing import Optional

import typer

from strapictl.config import Config
from strapictl.modules import InstallError, InstallMode, PluginInstaller

logger = logging.getLogger("strapictl.install")


def install_plugin(
    plugin: str = typer.Argument(..., help="Plugin name, e.g. `upload`"),
    dev: bool = typer.Option(False, "--dev", help="Symlink a local checkout instead of fetching from npm"),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Strapi project root"),
    packages_dir: Optional[Path] = typer.Option(
        None, "--packages-dir", help="Directory holding local plugin checkouts (with --dev)"
    ),
):
    """Install a Strapi plugin."""
    try:
        Config.validate()
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    installer = PluginInstaller(root.resolve(), packages_dir=packages_dir, logger=logger)
    mode = InstallMode.DEVELOPMENT if dev else InstallMode.REGISTRY

    try:
        installer.install(plugin, mode)
    except InstallError as e:
        logger.error(str(e), exc_info=logger.isEnabledFor(logging.DEBUG))
        raise typer.Exit(code=1)
