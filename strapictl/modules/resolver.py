"""Map a short plugin name to its npm package and install path."""
from pathlib import Path

from strapictl.config import Config
from strapictl.modules.models import ResolvedPlugin

PLUGINS_DIR = Path("plugins")


def resolve(name: str, prefix: str = None) -> ResolvedPlugin:
    """Resolve ``name`` (e.g. ``upload``) into a ``ResolvedPlugin``.

    Args:
        name: Short plugin name as typed on the command line
        prefix: Package namespace prefix (default: Config.PLUGIN_PREFIX)

    Returns:
        ResolvedPlugin with the package id and the project-relative install path
    """
    if prefix is None:
        prefix = Config.PLUGIN_PREFIX
    return ResolvedPlugin(
        name=name,
        package_id=f"{prefix}{name}",
        install_path=PLUGINS_DIR / name,
        prefix=prefix,
    )
