"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from template_studio.l1_entities.config import StudioConfig
from template_studio.l2_use_cases.ports.asset_generator import AssetGenerator
from template_studio.l2_use_cases.ports.asset_uploader import AssetUploader
from template_studio.l2_use_cases.ports.config_loader import ConfigLoader
from template_studio.l2_use_cases.ports.key_value_store import KeyValueStore
from template_studio.l2_use_cases.ports.session_repository import SessionRepository
from template_studio.l2_use_cases.ports.template_loader import TemplateLoader
from template_studio.l2_use_cases.template_registry import TemplateRegistry
from template_studio.l2_use_cases.upload_asset_use_case import UploadAssetUseCase
from template_studio.l2_use_cases.user_session_store import UserSessionStore
from template_studio.l3_interface_adapters.controllers.generation_controller import GenerationController
from template_studio.l3_interface_adapters.controllers.route_guard import RouteGuard
from template_studio.l3_interface_adapters.gateways.in_memory_session_repository import InMemorySessionRepository
from template_studio.l3_interface_adapters.gateways.key_value_stores import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
)
from template_studio.l3_interface_adapters.gateways.mock_asset_generator import MockAssetGenerator
from template_studio.l3_interface_adapters.gateways.mock_asset_uploader import MockAssetUploader
from template_studio.l3_interface_adapters.gateways.paths import SESSION_STORE_PATH
from template_studio.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from template_studio.l3_interface_adapters.gateways.yaml_template_loader import YamlTemplateLoader


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: StudioConfig,
        *,
        generator: AssetGenerator | None = None,
        uploader: AssetUploader | None = None,
        store_backend: KeyValueStore | None = None,
    ) -> None:
        self.config = config

        self.registry = TemplateRegistry(self.template_loader().load_builtins())
        self.repository: SessionRepository = InMemorySessionRepository()
        self.generator: AssetGenerator = generator or MockAssetGenerator()
        self.uploader: AssetUploader = uploader or MockAssetUploader()

        self.controller = GenerationController(
            config=config.generation,
            registry=self.registry,
            repository=self.repository,
            generator=self.generator,
        )
        self.route_guard = RouteGuard(config.routes)
        self.upload_uc = UploadAssetUseCase(
            self.uploader,
            supported_types=config.uploads.supported_image_types,
            size_limit=config.uploads.size_limits.image,
        )
        self.session_store = UserSessionStore(
            store_backend or self._build_store_backend(config.session_store.backend),
            clear_prefixes=config.session_store.clear_prefixes,
        )

    @staticmethod
    def _build_store_backend(backend: str) -> KeyValueStore:
        if backend == 'memory':
            return InMemoryKeyValueStore()
        if backend == 'json':
            return JsonFileKeyValueStore(SESSION_STORE_PATH)
        raise ValueError(f"Unknown session store backend '{backend}' (expected 'memory' or 'json')")

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()

    @staticmethod
    def template_loader() -> TemplateLoader:
        return YamlTemplateLoader()
