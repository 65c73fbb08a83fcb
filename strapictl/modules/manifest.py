"""
Admin plugins manifest.

The admin panel loads plugin bundles listed in ``admin/admin/src/config/plugins.json``.
A copy lives in ``admin/admin/build/config/plugins.json`` and must stay identical.
"""
import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any, Dict, List

from strapictl.config import Config
from strapictl.modules.errors import ManifestError
from strapictl.modules.models import ManifestUpdate, MirrorOutcome

logger = logging.getLogger(__name__)

MANIFEST_PATH = Path("admin") / "admin" / "src" / "config" / "plugins.json"
BUILD_MANIFEST_PATH = Path("admin") / "admin" / "build" / "config" / "plugins.json"


def plugin_source_url(entry_id: str, admin_url: str = None) -> str:
    """URL the admin panel fetches the plugin bundle from."""
    base = (admin_url or Config.ADMIN_URL).rstrip('/')
    return f"{base}/{entry_id}/main.js"


def load_manifest(path: Path) -> List[Dict[str, Any]]:
    """Read the manifest at ``path``; a missing file is an empty manifest.

    Raises:
        ManifestError: if the file cannot be read or is not a JSON array
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return []
    except (OSError, ValueError) as e:
        raise ManifestError(path, f"Impossible to access to manifest ({e})") from e

    if not isinstance(data, list):
        raise ManifestError(path, "Manifest is not a JSON array")
    return data


def add_entry(data: List[Dict[str, Any]], entry_id: str, admin_url: str = None) -> bool:
    """Append an entry for ``entry_id`` unless one exists. Returns True if appended."""
    if any(isinstance(entry, dict) and entry.get('id') == entry_id for entry in data):
        return False
    data.append({
        'id': entry_id,
        'source': plugin_source_url(entry_id, admin_url),
    })
    return True


def mirror_manifest(source: Path, mirror: Path) -> MirrorOutcome:
    """Replace ``mirror`` with a verbatim copy of ``source``."""
    if os.path.lexists(mirror):
        os.unlink(mirror)
        outcome = MirrorOutcome.REPLACED
    else:
        outcome = MirrorOutcome.CREATED
    mirror.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, mirror)
    return outcome


def update_manifest(root: Path, entry_id: str, admin_url: str = None) -> ManifestUpdate:
    """Register ``entry_id`` in the project's admin manifest and refresh its build copy.

    Args:
        root: Project root
        entry_id: Plugin id as listed in the manifest (prefix stripped)
        admin_url: Base URL of the admin panel (default: Config.ADMIN_URL)

    Returns:
        ManifestUpdate describing what changed

    Raises:
        ManifestError: if the manifest cannot be read, parsed or written
    """
    path = Path(root) / MANIFEST_PATH
    build_path = Path(root) / BUILD_MANIFEST_PATH

    created = not path.exists()
    data = load_manifest(path)
    added = add_entry(data, entry_id, admin_url)
    if not added:
        logger.debug(f"`{entry_id}` is already listed in {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(json.dumps(data, separators=(',', ':'), ensure_ascii=False))
        mirror = mirror_manifest(path, build_path)
    except OSError as e:
        raise ManifestError(path, f"Impossible to write to manifest ({e})") from e

    return ManifestUpdate(entry_id=entry_id, entry_added=added, created=created, mirror=mirror)
