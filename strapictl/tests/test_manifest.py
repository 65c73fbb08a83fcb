import json

import pytest

from strapictl.modules.errors import ManifestError
from strapictl.modules.manifest import (
    BUILD_MANIFEST_PATH,
    MANIFEST_PATH,
    update_manifest,
)
from strapictl.modules.models import MirrorOutcome

ADMIN_URL = "http://localhost:1337/admin"


def read_manifest(root):
    return json.loads((root / MANIFEST_PATH).read_text())


def test_creates_manifest_when_missing(project):
    result = update_manifest(project, "upload", admin_url=ADMIN_URL)

    assert result.created
    assert result.entry_added
    assert result.mirror is MirrorOutcome.CREATED
    assert (project / MANIFEST_PATH).read_text() == (
        '[{"id":"upload","source":"http://localhost:1337/admin/upload/main.js"}]'
    )


def test_update_is_idempotent(project):
    update_manifest(project, "upload", admin_url=ADMIN_URL)
    second = update_manifest(project, "upload", admin_url=ADMIN_URL)

    assert not second.entry_added
    assert not second.created
    ids = [entry["id"] for entry in read_manifest(project)]
    assert ids == ["upload"]


def test_appends_after_existing_entries(project):
    path = project / MANIFEST_PATH
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps([{"id": "content-manager", "source": "x"}]))

    update_manifest(project, "upload", admin_url=ADMIN_URL)

    assert [entry["id"] for entry in read_manifest(project)] == ["content-manager", "upload"]


def test_mirror_is_byte_identical(project):
    update_manifest(project, "upload", admin_url=ADMIN_URL)
    update_manifest(project, "email", admin_url=ADMIN_URL)

    assert (project / BUILD_MANIFEST_PATH).read_bytes() == (project / MANIFEST_PATH).read_bytes()


def test_stale_mirror_is_replaced(project):
    mirror = project / BUILD_MANIFEST_PATH
    mirror.parent.mkdir(parents=True)
    mirror.write_text('["stale"]')

    result = update_manifest(project, "upload", admin_url=ADMIN_URL)

    assert result.mirror is MirrorOutcome.REPLACED
    assert mirror.read_bytes() == (project / MANIFEST_PATH).read_bytes()


def test_malformed_manifest_raises(project):
    path = project / MANIFEST_PATH
    path.parent.mkdir(parents=True)
    path.write_text("{not json")

    with pytest.raises(ManifestError):
        update_manifest(project, "upload", admin_url=ADMIN_URL)

    assert path.read_text() == "{not json"
    assert not (project / BUILD_MANIFEST_PATH).exists()


def test_non_array_manifest_raises(project):
    path = project / MANIFEST_PATH
    path.parent.mkdir(parents=True)
    path.write_text('{"upload": true}')

    with pytest.raises(ManifestError):
        update_manifest(project, "upload", admin_url=ADMIN_URL)
