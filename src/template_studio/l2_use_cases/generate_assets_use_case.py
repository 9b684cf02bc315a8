"""Use case: run a template session through the generation capability."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from template_studio.l1_entities.asset import AssetGenerationRequest, AssetType, GeneratedAsset
from template_studio.l1_entities.errors import InternalConsistencyError, SessionClosedError
from template_studio.l1_entities.session import SessionStatus, TemplateGenerationSession
from template_studio.l1_entities.template import ContentTemplate
from template_studio.l2_use_cases.answer_collector import AnswerCollector
from template_studio.l2_use_cases.ports.asset_generator import AssetGenerator
from template_studio.l2_use_cases.session_state_machine import SessionStateMachine
from template_studio.l2_use_cases.utils.prompt_builder import build_generation_requests

log = logging.getLogger('ts.generation')


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation run. The session itself carries the final status."""

    session: TemplateGenerationSession
    failed_types: list[AssetType] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.session.status == SessionStatus.COMPLETED


class GenerateAssetsUseCase:
    """Finalize answers, build requests, generate concurrently, then close the session.

    Validation errors (missing answers) propagate and leave the session
    in-progress so the user can fix them. If every request fails the session
    is failed; one success is enough to complete it. A session closed by
    another caller mid-run stays as that caller left it; outstanding requests
    are cancelled and reported as failed.
    """

    def __init__(
        self,
        generator: AssetGenerator,
        collector: AnswerCollector,
        state_machine: SessionStateMachine,
    ) -> None:
        self._generator = generator
        self._collector = collector
        self._sessions = state_machine

    async def execute(self, session: TemplateGenerationSession, template: ContentTemplate) -> GenerationResult:
        session.ensure_open()
        self._collector.finalize_answers(session)
        try:
            requests = build_generation_requests(
                template,
                session.answers,
                session.selected_style,
                session.color_palette,
            )
        except InternalConsistencyError:
            log.error('Session %s: template %s cannot be resolved', session.id, template.id, exc_info=True)
            raise

        log.info('Session %s: issuing %d generation requests', session.id, len(requests))

        failed_types: list[AssetType] = []
        errors: list[str] = []
        tasks = {asyncio.ensure_future(self._generate(r)): r for r in requests}
        handled: set[int] = set()
        try:
            for next_done in asyncio.as_completed(tasks):
                request, asset, error = await next_done
                handled.add(request.sequence_index)
                if asset is None:
                    failed_types.append(request.type)
                    errors.append(f'{request.type.value}: {error}')
                    continue
                try:
                    self._sessions.record_generated_asset(session, asset)
                except SessionClosedError:
                    log.info('Session %s closed during generation; dropping remaining requests', session.id)
                    handled.discard(request.sequence_index)
                    break
        finally:
            pending = [t for t in tasks if not t.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        for request in tasks.values():
            if request.sequence_index not in handled:
                failed_types.append(request.type)
                errors.append(f'{request.type.value}: session closed before the asset was recorded')

        with self._sessions.locks.hold(session):
            if session.is_terminal:
                log.info('Session %s already %s; leaving it as is', session.id, session.status.value)
            elif session.generated_assets:
                self._sessions.complete_session(session)
            else:
                self._sessions.fail_session(session, '; '.join(errors) or 'No assets generated')
        return GenerationResult(session=session, failed_types=failed_types, errors=errors)

    async def _generate(
        self, request: AssetGenerationRequest
    ) -> tuple[AssetGenerationRequest, GeneratedAsset | None, str]:
        try:
            asset = await self._generator.generate(request)
        except Exception as e:
            err = f'{type(e).__name__}: {e}'
            log.error('Generation of %s failed: %s', request.type.value, err, exc_info=True)
            return request, None, err
        if asset.type != request.type:
            err = f'generator returned {asset.type.value} for a {request.type.value} request'
            log.error(err)
            return request, None, err
        return request, asset, ''
