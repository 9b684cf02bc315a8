"""GenerationController — orchestrates use cases for one UI-facing template flow."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from template_studio.l1_entities.config import GenerationConfig
from template_studio.l1_entities.errors import TemplateNotFoundError
from template_studio.l1_entities.session import TemplateGenerationSession
from template_studio.l1_entities.template import ContentTemplate
from template_studio.l2_use_cases.answer_collector import AnswerCollector
from template_studio.l2_use_cases.generate_assets_use_case import GenerateAssetsUseCase, GenerationResult
from template_studio.l2_use_cases.ports.asset_generator import AssetGenerator
from template_studio.l2_use_cases.ports.session_repository import SessionRepository
from template_studio.l2_use_cases.session_state_machine import SessionStateMachine
from template_studio.l2_use_cases.template_registry import TemplateRegistry
from template_studio.l2_use_cases.utils.prompt_builder import resolve_prompt
from template_studio.l2_use_cases.utils.style_coordination import CoordinationReport, check_style_coordination

log = logging.getLogger('ts.controller')


class GenerationController:
    """Central orchestrator bridging use cases to a UI layer.

    Every call is addressed by (session_id, user_id); a user never sees
    another user's session.
    """

    def __init__(
        self,
        config: GenerationConfig,
        registry: TemplateRegistry,
        repository: SessionRepository,
        generator: AssetGenerator,
    ) -> None:
        self._config = config
        self.registry = registry
        self.sessions = SessionStateMachine(repository)
        self.answers = AnswerCollector(registry, self.sessions.locks)
        self._generate_uc = GenerateAssetsUseCase(generator, self.answers, self.sessions)

    def available_templates(self, user_id: str | None) -> list[ContentTemplate]:
        return self.registry.list_for_user(user_id)

    def start(
        self,
        template_id: str,
        user_id: str,
        *,
        style: str | None = None,
        palette: Sequence[str] | None = None,
    ) -> TemplateGenerationSession:
        """Begin a template flow. Raises TemplateNotFoundError for unknown or foreign templates."""
        template = self.registry.get(template_id)
        if template.owner_id is not None and template.owner_id != user_id:
            raise TemplateNotFoundError(f"Template not found: '{template_id}'")
        return self.sessions.create_session(
            template.id,
            user_id,
            style=style or self._config.default_style,
            palette=palette if palette is not None else self._config.default_palette,
        )

    def sessions_for(self, user_id: str) -> list[TemplateGenerationSession]:
        """The user's sessions, oldest first."""
        return self.sessions.list_sessions(user_id)

    def answer(self, session_id: str, user_id: str, question_id: str, value: str | Sequence[str]) -> None:
        session = self.sessions.get_session(session_id, user_id)
        self.answers.set_answer(session, question_id, value)

    def choose_style(self, session_id: str, user_id: str, style: str, palette: Sequence[str]) -> None:
        session = self.sessions.get_session(session_id, user_id)
        self.sessions.choose_style(session, style, palette)

    def preview_prompt(self, session_id: str, user_id: str) -> str:
        """Resolved prompt for the answers so far. Raises MissingRequiredAnswerError."""
        session = self.sessions.get_session(session_id, user_id)
        self.answers.finalize_answers(session)
        return resolve_prompt(self.registry.get(session.template_id), session.answers)

    async def generate(self, session_id: str, user_id: str) -> GenerationResult:
        session = self.sessions.get_session(session_id, user_id)
        template = self.registry.get(session.template_id)
        result = await self._generate_uc.execute(session, template)
        log.info(
            'Session %s generation finished: status=%s, failed=%s',
            session.id,
            session.status.value,
            [t.value for t in result.failed_types],
        )
        return result

    def cancel(self, session_id: str, user_id: str, reason: str = 'Cancelled by user') -> None:
        session = self.sessions.get_session(session_id, user_id)
        self.sessions.fail_session(session, reason)

    def coordination(self, session_id: str, user_id: str) -> CoordinationReport:
        session = self.sessions.get_session(session_id, user_id)
        template = self.registry.get(session.template_id)
        return check_style_coordination(session.generated_assets, template.asset_types)
