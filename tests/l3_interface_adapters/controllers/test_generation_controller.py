"""Tests for GenerationController -- real use cases, fake generator."""

from __future__ import annotations

import pytest

from template_studio.l1_entities.errors import (
    MissingRequiredAnswerError,
    SessionClosedError,
    SessionNotFoundError,
    TemplateNotFoundError,
)
from template_studio.l1_entities.session import SessionStatus
from template_studio.l1_entities.template import ContentTemplate, TemplateQuestion
from template_studio.l3_interface_adapters.controllers.generation_controller import GenerationController
from template_studio.l3_interface_adapters.gateways.in_memory_session_repository import InMemorySessionRepository


@pytest.fixture
def controller(default_config, builtin_registry, fake_generator):
    return GenerationController(
        config=default_config.generation,
        registry=builtin_registry,
        repository=InMemorySessionRepository(),
        generator=fake_generator,
    )


def _answer_restaurant(controller, session_id):
    controller.answer(session_id, 'u1', 'restaurant_name', 'Bella Vista')
    controller.answer(session_id, 'u1', 'cuisine_type', 'Italian')
    controller.answer(session_id, 'u1', 'dining_style', 'Casual Dining')
    controller.answer(session_id, 'u1', 'specialties', 'Wood-fired pizza')
    controller.answer(session_id, 'u1', 'atmosphere', ['Cozy', 'Family-Friendly'])


class TestGenerationController:
    def test_start_uses_default_style(self, controller, default_config):
        session = controller.start('restaurant', 'u1')
        assert session.selected_style == default_config.generation.default_style
        assert session.color_palette == default_config.generation.default_palette

    def test_start_with_explicit_style(self, controller):
        session = controller.start('retail', 'u1', style='vintage', palette=['#abc'])
        assert session.selected_style == 'vintage'
        assert session.color_palette == ['#abc']

    def test_start_unknown_template(self, controller):
        with pytest.raises(TemplateNotFoundError):
            controller.start('florist', 'u1')

    def test_foreign_custom_template_is_not_found(self, controller):
        controller.registry.save_custom(
            ContentTemplate(
                id='private',
                name='Private',
                industry='x',
                owner_id='u2',
                questions=[TemplateQuestion(id='name', question='Name?')],
                prompt_template='{name}',
            )
        )
        with pytest.raises(TemplateNotFoundError):
            controller.start('private', 'u1')
        assert controller.start('private', 'u2').template_id == 'private'

    def test_preview_prompt(self, controller):
        session = controller.start('restaurant', 'u1')
        _answer_restaurant(controller, session.id)
        prompt = controller.preview_prompt(session.id, 'u1')
        assert prompt.startswith('Create marketing content for Bella Vista, a Casual Dining Italian restaurant.')
        assert 'Atmosphere: Cozy, Family-Friendly.' in prompt
        assert prompt.endswith('Special events: ')

    def test_preview_prompt_needs_required_answers(self, controller):
        session = controller.start('restaurant', 'u1')
        with pytest.raises(MissingRequiredAnswerError):
            controller.preview_prompt(session.id, 'u1')

    def test_other_user_cannot_touch_session(self, controller):
        session = controller.start('restaurant', 'u1')
        with pytest.raises(SessionNotFoundError):
            controller.answer(session.id, 'u2', 'restaurant_name', 'Hijack')

    @pytest.mark.asyncio
    async def test_generate_restaurant(self, controller, fake_generator):
        session = controller.start('restaurant', 'u1')
        _answer_restaurant(controller, session.id)

        result = await controller.generate(session.id, 'u1')

        assert result.ok
        assert session.status == SessionStatus.COMPLETED
        assert len(fake_generator.requests) == 2
        report = controller.coordination(session.id, 'u1')
        assert report.is_coordinated

    def test_cancel(self, controller):
        session = controller.start('retail', 'u1')
        controller.cancel(session.id, 'u1')
        assert session.status == SessionStatus.FAILED
        assert session.failure_reason == 'Cancelled by user'
        with pytest.raises(SessionClosedError):
            controller.choose_style(session.id, 'u1', 'bold', [])

    def test_available_templates(self, controller):
        assert [t.id for t in controller.available_templates(None)] == ['automotive', 'restaurant', 'retail']

    def test_sessions_for(self, controller):
        first = controller.start('retail', 'u1')
        second = controller.start('restaurant', 'u1')
        controller.start('retail', 'u2')
        assert [s.id for s in controller.sessions_for('u1')] == [first.id, second.id]
