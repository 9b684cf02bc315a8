"""Tests for DependencyContainer wiring."""

from __future__ import annotations

import pytest

from template_studio.l3_interface_adapters.gateways.key_value_stores import InMemoryKeyValueStore
from template_studio.l3_interface_adapters.gateways.mock_asset_generator import MockAssetGenerator
from template_studio.l3_interface_adapters.gateways.mock_asset_uploader import MockAssetUploader
from template_studio.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from template_studio.l3_interface_adapters.gateways.yaml_template_loader import YamlTemplateLoader
from template_studio.l4_frameworks_and_drivers import container as container_module
from template_studio.l4_frameworks_and_drivers.config import build_app_config
from template_studio.l4_frameworks_and_drivers.container import DependencyContainer
from tests.conftest import FakeAssetGenerator


class TestDependencyContainer:
    def test_default_wiring(self):
        container = DependencyContainer(build_app_config({'session_store': {'backend': 'memory'}}))
        assert isinstance(container.generator, MockAssetGenerator)
        assert isinstance(container.uploader, MockAssetUploader)
        assert [t.id for t in container.registry.list_for_user(None)] == ['automotive', 'restaurant', 'retail']
        assert container.controller.registry is container.registry

    def test_injected_generator(self):
        fake = FakeAssetGenerator()
        container = DependencyContainer(build_app_config({'session_store': {'backend': 'memory'}}), generator=fake)
        assert container.generator is fake

    def test_json_backend_uses_session_store_path(self, tmp_path, monkeypatch):
        path = tmp_path / 'store.json'
        monkeypatch.setattr(container_module, 'SESSION_STORE_PATH', path)
        container = DependencyContainer(build_app_config({}))
        container.session_store.set('user:a', '1')
        assert path.exists()

    def test_explicit_backend_wins(self):
        backend = InMemoryKeyValueStore({'auth:x': '1'})
        container = DependencyContainer(build_app_config({}), store_backend=backend)
        assert container.session_store.clear() == ['auth:x']

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown session store backend 'redis'"):
            DependencyContainer(build_app_config({'session_store': {'backend': 'redis'}}))

    def test_memory_backend(self):
        assert isinstance(DependencyContainer._build_store_backend('memory'), InMemoryKeyValueStore)  # noqa: SLF001

    def test_loaders(self):
        assert isinstance(DependencyContainer.config_loader(), YamlConfigLoader)
        assert isinstance(DependencyContainer.template_loader(), YamlTemplateLoader)
