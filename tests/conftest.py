"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import asyncio

import pytest

from template_studio.l1_entities.asset import (
    AssetGenerationRequest,
    AssetMetadata,
    AssetType,
    GeneratedAsset,
    UploadedAsset,
    UploadFile,
)
from template_studio.l1_entities.config import StudioConfig
from template_studio.l1_entities.template import ContentTemplate, QuestionKind, TemplateOrigin, TemplateQuestion
from template_studio.l2_use_cases.answer_collector import AnswerCollector
from template_studio.l2_use_cases.session_state_machine import SessionStateMachine
from template_studio.l2_use_cases.template_registry import TemplateRegistry
from template_studio.l3_interface_adapters.gateways.in_memory_session_repository import InMemorySessionRepository
from template_studio.l3_interface_adapters.gateways.yaml_template_loader import YamlTemplateLoader
from template_studio.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


def make_asset(asset_type: AssetType = AssetType.BACKGROUND, asset_id: str = 'asset-1', style: str = 'modern-minimal'):
    return GeneratedAsset(
        id=asset_id,
        type=asset_type,
        url=f'mock://assets/{asset_id}.png',
        prompt='prompt',
        style=style,
        metadata=AssetMetadata(width=1024, height=1024, format='png'),
    )


class FakeAssetGenerator:
    """Fake generator for L2 use case tests."""

    def __init__(
        self,
        *,
        fail_types: set[AssetType] | None = None,
        delays: dict[AssetType, float] | None = None,
    ) -> None:
        self._fail_types = fail_types or set()
        self._delays = delays or {}
        self.requests: list[AssetGenerationRequest] = []
        self.cancelled: list[AssetType] = []
        self._counter = 0

    async def generate(self, request: AssetGenerationRequest) -> GeneratedAsset:
        self.requests.append(request)
        delay = self._delays.get(request.type, 0.0)
        if delay:
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.cancelled.append(request.type)
                raise
        if request.type in self._fail_types:
            raise ConnectionError(f'{request.type.value} backend down')
        self._counter += 1
        asset = make_asset(request.type, f'{request.type.value}-{self._counter}', request.style)
        return asset.model_copy(update={'prompt': request.prompt})


class FakeAssetUploader:
    """Fake uploader for L2/L4 upload tests."""

    def __init__(self, *, error: Exception | None = None) -> None:
        self._error = error
        self.calls: list[tuple[UploadFile, bytes, str, str, str]] = []

    async def upload(
        self,
        file: UploadFile,
        content: bytes,
        asset_type: str,
        user_id: str,
        filename: str,
    ) -> UploadedAsset:
        self.calls.append((file, content, asset_type, user_id, filename))
        if self._error is not None:
            raise self._error
        return UploadedAsset(
            id=f'uploaded-{filename}',
            url=f'memory://{filename}',
            thumbnail=f'memory://thumb/{filename}',
            name=file.name,
            type=asset_type,
            created_by=user_id,
            metadata=AssetMetadata(width=1024, height=1024, format='png', size=file.size),
        )


# --- Standard Fixtures ---


@pytest.fixture
def automotive_template() -> ContentTemplate:
    """Small automotive template: required business name, optional features and offer."""
    return ContentTemplate(
        id='automotive',
        name='Automotive Dealership',
        origin=TemplateOrigin.BUILT_IN,
        industry='automotive',
        questions=[
            TemplateQuestion(id='businessName', question='Business name?', kind=QuestionKind.TEXT, required=True),
            TemplateQuestion(
                id='features',
                question='Key selling points?',
                kind=QuestionKind.MULTISELECT,
                options=['Best Prices', 'Financing Available', 'Expert Service'],
            ),
            TemplateQuestion(id='offer', question='Special offer?', kind=QuestionKind.TEXTAREA, max_length=40),
        ],
        prompt_template='Create marketing content for {businessName}. Features: {features}. Offer: {offer}',
    )


@pytest.fixture
def default_config() -> StudioConfig:
    return build_app_config({})


@pytest.fixture
def registry(automotive_template: ContentTemplate) -> TemplateRegistry:
    return TemplateRegistry([automotive_template])


@pytest.fixture
def builtin_registry() -> TemplateRegistry:
    return TemplateRegistry(YamlTemplateLoader().load_builtins())


@pytest.fixture
def state_machine() -> SessionStateMachine:
    return SessionStateMachine(InMemorySessionRepository())


@pytest.fixture
def collector(registry: TemplateRegistry, state_machine: SessionStateMachine) -> AnswerCollector:
    return AnswerCollector(registry, state_machine.locks)


@pytest.fixture
def fake_generator() -> FakeAssetGenerator:
    return FakeAssetGenerator()


@pytest.fixture
def fake_uploader() -> FakeAssetUploader:
    return FakeAssetUploader()
