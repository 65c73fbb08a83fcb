import json
import logging

import pytest


@pytest.fixture
def project(tmp_path):
    """An empty Strapi project."""
    root = tmp_path / "app"
    root.mkdir()
    (root / "package.json").write_text(json.dumps({
        "name": "app",
        "dependencies": {"strapi": "3.0.0-alpha"},
    }))
    return root


@pytest.fixture
def packages_dir(tmp_path):
    """Sibling checkouts used by --dev installs."""
    packages = tmp_path / "packages"
    (packages / "strapi-plugin-upload").mkdir(parents=True)
    (packages / "strapi-plugin-upload" / "package.json").write_text("{}")
    return packages


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """CliRunner swaps stdout per invocation; drop handlers bound to old streams."""
    yield
    logger = logging.getLogger("strapictl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
