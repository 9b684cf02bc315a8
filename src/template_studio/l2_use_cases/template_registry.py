"""Use case: hold built-in and custom templates and validate custom edits."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

import pydantic

from template_studio.l1_entities.errors import TemplateInvalidError, TemplateNotFoundError
from template_studio.l1_entities.template import ContentTemplate, TemplateOrigin

log = logging.getLogger('ts.registry')


class TemplateRegistry:
    """Built-in templates are seeded once and never change; custom ones belong to a user."""

    def __init__(self, builtins: Iterable[ContentTemplate] = ()) -> None:
        self._lock = threading.Lock()
        self._builtins: dict[str, ContentTemplate] = {}
        self._custom: dict[str, ContentTemplate] = {}
        for tmpl in builtins:
            if tmpl.origin != TemplateOrigin.BUILT_IN:
                raise TemplateInvalidError(f"Template '{tmpl.id}' is not a built-in template")
            if tmpl.id in self._builtins:
                raise TemplateInvalidError(f"Duplicate built-in template id '{tmpl.id}'")
            self._builtins[tmpl.id] = tmpl
        log.debug('Seeded %d built-in templates', len(self._builtins))

    def get(self, template_id: str) -> ContentTemplate:
        with self._lock:
            tmpl = self._builtins.get(template_id) or self._custom.get(template_id)
        if tmpl is None:
            raise TemplateNotFoundError(f"Template not found: '{template_id}'")
        return tmpl

    def list_for_user(self, user_id: str | None) -> list[ContentTemplate]:
        """Active built-ins followed by the user's active custom templates (oldest first)."""
        with self._lock:
            builtins = [t for t in self._builtins.values() if t.is_active]
            custom = [t for t in self._custom.values() if t.is_active and user_id is not None and t.owner_id == user_id]
        custom.sort(key=lambda t: t.created_at)
        return builtins + custom

    def save_custom(self, template: ContentTemplate | dict) -> ContentTemplate:
        """Create or update a custom template. Raises TemplateInvalidError."""
        if isinstance(template, dict):
            try:
                template = ContentTemplate.model_validate({'origin': TemplateOrigin.CUSTOM.value, **template})
            except pydantic.ValidationError as e:
                raise TemplateInvalidError(str(e)) from e
        if template.origin != TemplateOrigin.CUSTOM:
            raise TemplateInvalidError('Only custom templates can be saved')
        if not template.owner_id:
            raise TemplateInvalidError('Custom templates need an owner')
        ids = [q.id for q in template.questions]
        if len(ids) != len(set(ids)):
            raise TemplateInvalidError('Question ids must be unique within a template')
        undeclared = template.undeclared_placeholders()
        if undeclared:
            raise TemplateInvalidError(f'Prompt references undeclared questions: {", ".join(undeclared)}')

        with self._lock:
            if template.id in self._builtins:
                raise TemplateInvalidError(f"'{template.id}' is a built-in template and cannot be modified")
            existing = self._custom.get(template.id)
            if existing is not None and existing.owner_id != template.owner_id:
                raise TemplateInvalidError(f"Template '{template.id}' belongs to another user")
            self._custom[template.id] = template

        log.info(
            '%s custom template %s (owner=%s, %d questions)',
            'Updated' if existing else 'Created',
            template.id,
            template.owner_id,
            len(template.questions),
        )
        return template

    def delete_custom(self, template_id: str, user_id: str) -> None:
        with self._lock:
            if template_id in self._builtins:
                raise TemplateInvalidError(f"'{template_id}' is a built-in template and cannot be deleted")
            existing = self._custom.get(template_id)
            if existing is None or existing.owner_id != user_id:
                raise TemplateNotFoundError(f"Template not found: '{template_id}'")
            del self._custom[template_id]
        log.info('Deleted custom template %s (owner=%s)', template_id, user_id)
