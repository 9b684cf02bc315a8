"""Tests for the asset-library upload route via FastAPI's TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from starlette.datastructures import UploadFile as StarletteUploadFile

from template_studio.l3_interface_adapters.gateways.key_value_stores import InMemoryKeyValueStore
from template_studio.l4_frameworks_and_drivers.config import build_app_config
from template_studio.l4_frameworks_and_drivers.container import DependencyContainer
from template_studio.l4_frameworks_and_drivers.upload_api import create_app
from tests.conftest import FakeAssetUploader

URL = '/api/asset-library/upload'


def _client(uploader, **overrides):
    container = DependencyContainer(
        build_app_config(overrides),
        uploader=uploader,
        store_backend=InMemoryKeyValueStore(),
    )
    return TestClient(create_app(container))


@pytest.fixture
def client(fake_uploader):
    return _client(fake_uploader)


class TestUploadRoute:
    def test_success(self, client, fake_uploader):
        resp = client.post(
            URL,
            files={'file': ('logo.png', b'\x89PNG', 'image/png')},
            data={'type': 'logo', 'userId': 'u1'},
        )

        assert resp.status_code == 200
        body = resp.json()
        assert body['success'] is True
        assert body['message'] == 'Asset uploaded successfully'
        assert body['asset']['created_by'] == 'u1'
        assert body['asset']['name'] == 'logo.png'
        declared, content, asset_type, user_id, _ = fake_uploader.calls[0]
        assert declared.size == 4
        assert (content, asset_type, user_id) == (b'\x89PNG', 'logo', 'u1')

    @pytest.mark.parametrize(
        'files,data',
        [
            (None, {'type': 'logo', 'userId': 'u1'}),
            ({'file': ('a.png', b'x', 'image/png')}, {'userId': 'u1'}),
            ({'file': ('a.png', b'x', 'image/png')}, {'type': 'logo'}),
        ],
    )
    def test_missing_fields(self, client, fake_uploader, files, data):
        resp = client.post(URL, files=files, data=data)
        assert resp.status_code == 400
        assert resp.json() == {'error': 'Missing required fields: file, type, userId'}
        assert fake_uploader.calls == []

    def test_bad_type(self, client, fake_uploader):
        resp = client.post(
            URL,
            files={'file': ('notes.txt', b'hello', 'text/plain')},
            data={'type': 'logo', 'userId': 'u1'},
        )
        assert resp.status_code == 400
        assert 'Invalid file type' in resp.json()['error']
        assert fake_uploader.calls == []

    def test_too_large(self, fake_uploader):
        client = _client(fake_uploader, uploads={'size_limits': {'image': 3}})
        resp = client.post(
            URL,
            files={'file': ('big.png', b'1234', 'image/png')},
            data={'type': 'background', 'userId': 'u1'},
        )
        assert resp.status_code == 400
        assert 'File size exceeds limit' in resp.json()['error']

    def test_uploader_failure_is_500(self):
        client = _client(FakeAssetUploader(error=RuntimeError('storage down')))
        resp = client.post(
            URL,
            files={'file': ('logo.png', b'x', 'image/png')},
            data={'type': 'logo', 'userId': 'u1'},
        )
        assert resp.status_code == 500
        assert resp.json() == {'error': 'Failed to upload asset'}

    def test_oversize_body_is_not_read_in_full(self, fake_uploader, monkeypatch):
        read_sizes = []
        original_read = StarletteUploadFile.read

        async def recording_read(self, size=-1):
            read_sizes.append(size)
            return await original_read(self, size)

        monkeypatch.setattr(StarletteUploadFile, 'read', recording_read)
        client = _client(fake_uploader, uploads={'size_limits': {'image': 10}})

        resp = client.post(
            URL,
            files={'file': ('big.png', b'x' * 5000, 'image/png')},
            data={'type': 'background', 'userId': 'u1'},
        )

        assert resp.status_code == 400
        assert 'File size exceeds limit' in resp.json()['error']
        assert read_sizes == [11]
        assert fake_uploader.calls == []
