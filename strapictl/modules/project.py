"""Strapi project detection."""
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def is_valid_project(root: Path) -> bool:
    """Return True when ``root`` holds a package.json depending on strapi."""
    package_json = Path(root) / "package.json"
    try:
        with open(package_json, "r", encoding="utf-8") as f:
            pkg = json.load(f)
    except FileNotFoundError:
        logger.debug(f"No package.json in {root}")
        return False
    except (OSError, ValueError) as e:
        logger.debug(f"Unreadable package.json in {root}: {e}")
        return False

    if not isinstance(pkg, dict):
        return False
    dependencies = pkg.get("dependencies")
    return isinstance(dependencies, dict) and "strapi" in dependencies
