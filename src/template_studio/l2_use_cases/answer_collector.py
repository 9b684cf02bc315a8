"""Use case: collect questionnaire answers for a session."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from template_studio.l1_entities.answers import Answer, MultiAnswer, SingleAnswer
from template_studio.l1_entities.errors import AnswerValidationError, MissingRequiredAnswerError
from template_studio.l1_entities.session import TemplateGenerationSession
from template_studio.l1_entities.template import QuestionKind, TemplateQuestion
from template_studio.l2_use_cases.template_registry import TemplateRegistry
from template_studio.l2_use_cases.utils.session_locks import SessionLocks

log = logging.getLogger('ts.session')


class AnswerCollector:
    """Validates raw answers at the boundary and stores them as tagged answers."""

    def __init__(self, registry: TemplateRegistry, locks: SessionLocks) -> None:
        self._registry = registry
        self._locks = locks

    def set_answer(
        self,
        session: TemplateGenerationSession,
        question_id: str,
        value: str | Sequence[str],
    ) -> None:
        """Validate and store one answer. A blank optional answer clears the question."""
        template = self._registry.get(session.template_id)
        question = template.question(question_id)
        if question is None:
            raise AnswerValidationError(question_id, f"not a question of template '{template.id}'")
        answer = _to_answer(question, value)

        with self._locks.hold(session):
            session.ensure_open()
            if answer.is_blank():
                session.answers.pop(question_id, None)
            else:
                session.answers[question_id] = answer
            session.touch()
        log.debug('Session %s: answered %s', session.id, question_id)

    def finalize_answers(self, session: TemplateGenerationSession) -> None:
        """Raise MissingRequiredAnswerError unless every required question is answered."""
        template = self._registry.get(session.template_id)
        missing = [
            q.id
            for q in template.questions
            if q.required and (q.id not in session.answers or session.answers[q.id].is_blank())
        ]
        if missing:
            raise MissingRequiredAnswerError(missing)


def _to_answer(question: TemplateQuestion, value: str | Sequence[str]) -> Answer:
    if question.kind == QuestionKind.MULTISELECT:
        if isinstance(value, str) or not all(isinstance(v, str) for v in value):
            raise AnswerValidationError(question.id, 'multiselect answers must be a list of strings')
        values = list(value)
        unknown = [v for v in values if v not in question.options]
        if unknown:
            raise AnswerValidationError(question.id, f'unknown options: {", ".join(unknown)}')
        if len(set(values)) != len(values):
            raise AnswerValidationError(question.id, 'options selected more than once')
        answer: Answer = MultiAnswer(values=values)
    else:
        if not isinstance(value, str):
            raise AnswerValidationError(question.id, f'{question.kind.value} answers must be a single string')
        if question.kind == QuestionKind.SELECT and value and value not in question.options:
            raise AnswerValidationError(question.id, f"'{value}' is not one of the options")
        if question.max_length is not None and len(value) > question.max_length:
            raise AnswerValidationError(question.id, f'longer than {question.max_length} characters')
        answer = SingleAnswer(kind=question.kind.value, value=value)

    if question.required and answer.is_blank():
        raise AnswerValidationError(question.id, 'an answer is required')
    return answer
