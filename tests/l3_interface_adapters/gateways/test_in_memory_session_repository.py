"""Tests for InMemorySessionRepository."""

from datetime import timedelta

import pytest

from template_studio.l1_entities.asset import utc_now
from template_studio.l1_entities.session import TemplateGenerationSession
from template_studio.l3_interface_adapters.gateways.in_memory_session_repository import InMemorySessionRepository


class TestInMemorySessionRepository:
    def test_add_and_get(self):
        repo = InMemorySessionRepository()
        session = TemplateGenerationSession(id='s1', template_id='t', user_id='u1')
        repo.add(session)
        assert repo.get('s1') is session
        assert repo.get('s2') is None

    def test_duplicate_id(self):
        repo = InMemorySessionRepository()
        repo.add(TemplateGenerationSession(id='s1', template_id='t', user_id='u1'))
        with pytest.raises(ValueError, match='already exists'):
            repo.add(TemplateGenerationSession(id='s1', template_id='t', user_id='u1'))

    def test_list_for_user_oldest_first(self):
        repo = InMemorySessionRepository()
        now = utc_now()
        repo.add(TemplateGenerationSession(id='new', template_id='t', user_id='u1', created_at=now))
        earlier = now - timedelta(hours=1)
        repo.add(TemplateGenerationSession(id='old', template_id='t', user_id='u1', created_at=earlier))
        repo.add(TemplateGenerationSession(id='other', template_id='t', user_id='u2'))
        assert [s.id for s in repo.list_for_user('u1')] == ['old', 'new']
