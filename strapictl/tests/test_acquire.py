import asyncio
import os
import sys

import pytest

from strapictl.modules import acquire
from strapictl.modules.acquire import CommandResult
from strapictl.modules.errors import (
    AlreadyInstalledError,
    InstallFailedError,
    RegistryFetchError,
)
from strapictl.modules.resolver import resolve


@pytest.fixture
def upload():
    return resolve("upload", prefix="strapi-plugin-")


def test_existing_install_path_is_rejected(project, upload):
    (project / "plugins" / "upload").mkdir(parents=True)
    with pytest.raises(AlreadyInstalledError) as exc:
        acquire.ensure_not_installed(project, upload)
    assert "plugins/upload" in str(exc.value)


def test_dangling_symlink_counts_as_installed(project, upload, tmp_path):
    (project / "plugins").mkdir()
    os.symlink(tmp_path / "gone", project / "plugins" / "upload")
    with pytest.raises(AlreadyInstalledError):
        acquire.ensure_not_installed(project, upload)


def test_link_local_creates_symlink(project, packages_dir, upload):
    target = acquire.link_local(project, upload, packages_dir)

    assert target.is_symlink()
    assert os.path.realpath(target) == str((packages_dir / "strapi-plugin-upload").resolve())


def test_link_local_missing_source(project, tmp_path, upload):
    with pytest.raises(InstallFailedError):
        acquire.link_local(project, upload, tmp_path / "nowhere")
    assert not os.path.lexists(project / "plugins" / "upload")


def test_npm_install_command(upload):
    assert acquire.npm_install_command(upload, npm_bin="npm", tag="alpha") == [
        "npm", "install", "strapi-plugin-upload@alpha", "--ignore-scripts", "--no-save",
    ]


def test_fetch_from_registry_failure_carries_hint(project, upload):
    async def failing(cmd, cwd):
        return CommandResult(returncode=1, stderr="404 Not Found")

    with pytest.raises(RegistryFetchError) as exc:
        asyncio.run(acquire.fetch_from_registry(project, upload, runner=failing))

    assert exc.value.output == "404 Not Found"
    assert exc.value.hint_url.endswith("/strapi-plugin-upload")
    assert exc.value.hint_url in str(exc.value)


def test_fetch_from_registry_missing_binary(project, upload):
    with pytest.raises(RegistryFetchError):
        asyncio.run(acquire.fetch_from_registry(
            project, upload, npm_bin="strapictl-no-such-npm-binary"
        ))


def test_run_command_captures_output(tmp_path):
    result = asyncio.run(acquire.run_command([sys.executable, "-c", "print('hi')"], tmp_path))
    assert result.returncode == 0
    assert result.stdout.strip() == "hi"


def test_relocate_moves_package(project, upload):
    source = project / "node_modules" / "strapi-plugin-upload"
    source.mkdir(parents=True)
    (source / "index.js").write_text("module.exports = {};")

    target = acquire.relocate(project, upload)

    assert not source.exists()
    assert (target / "index.js").read_text() == "module.exports = {};"


def test_relocate_without_download(project, upload):
    with pytest.raises(InstallFailedError):
        acquire.relocate(project, upload)
