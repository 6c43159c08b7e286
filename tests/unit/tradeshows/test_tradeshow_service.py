"""Unit tests for TradeshowService.

These tests verify:
- Toggling flips the stored flag and toggling twice restores it
- Missing tradeshows are reported as not found
- Concurrent toggles resolve as last write wins
"""

from unittest.mock import AsyncMock

import pytest

from leadbooth.core.errors import ConflictError, NotFoundError
from leadbooth.modules.tradeshows.models import Tradeshow
from leadbooth.modules.tradeshows.services import TradeshowService
from tests.factories.session import SessionUserFactory, TradeshowCreateFactory


pytestmark = pytest.mark.unit


def _tradeshow(is_active: bool = True) -> Tradeshow:
    return Tradeshow(id=7, name="Spring Expo", slug="spring-expo", is_active=is_active)


@pytest.fixture
def repo() -> AsyncMock:
    repo = AsyncMock()
    repo.update.side_effect = lambda tradeshow: tradeshow
    return repo


@pytest.fixture
def admin():
    return SessionUserFactory.build(role="admin", email="admin@acme.example.com")


class TestToggleActive:
    """Tests for toggle_active."""

    async def test_active_becomes_archived(self, repo, admin):
        repo.get_by_id.return_value = _tradeshow(is_active=True)

        result = await TradeshowService(repo).toggle_active(7, admin)

        assert result.success is True
        assert result.is_active is False
        assert result.message == "Tradeshow archived"

    async def test_archived_becomes_active(self, repo, admin):
        repo.get_by_id.return_value = _tradeshow(is_active=False)

        result = await TradeshowService(repo).toggle_active(7, admin)

        assert result.is_active is True
        assert result.message == "Tradeshow activated"

    async def test_toggling_twice_restores_state(self, repo, admin):
        tradeshow = _tradeshow(is_active=True)
        repo.get_by_id.return_value = tradeshow
        service = TradeshowService(repo)

        await service.toggle_active(7, admin)
        second = await service.toggle_active(7, admin)

        assert second.is_active is True
        assert tradeshow.is_active is True
        assert tradeshow.updated_at is not None

    async def test_missing_tradeshow(self, repo, admin):
        repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await TradeshowService(repo).toggle_active(999, admin)

        assert exc_info.value.message == "Tradeshow not found"
        repo.update.assert_not_awaited()

    async def test_concurrent_toggles_last_write_wins(self, admin):
        """Two toggles reading the same stored state both write its negation."""
        stored = {"is_active": True}

        def read(_tradeshow_id):
            return _tradeshow(is_active=stored["is_active"])

        def write(tradeshow):
            stored["is_active"] = tradeshow.is_active
            return tradeshow

        first_repo, second_repo = AsyncMock(), AsyncMock()
        first_repo.get_by_id.side_effect = read
        second_repo.get_by_id.side_effect = read

        # Both requests read before either writes
        first_snapshot = await first_repo.get_by_id(7)
        second_snapshot = await second_repo.get_by_id(7)
        first_repo.get_by_id.side_effect = None
        first_repo.get_by_id.return_value = first_snapshot
        second_repo.get_by_id.side_effect = None
        second_repo.get_by_id.return_value = second_snapshot
        first_repo.update.side_effect = write
        second_repo.update.side_effect = write

        first = await TradeshowService(first_repo).toggle_active(7, admin)
        second = await TradeshowService(second_repo).toggle_active(7, admin)

        assert first.is_active is False
        assert second.is_active is False
        assert stored["is_active"] is False


class TestCreate:
    """Tests for tradeshow creation."""

    async def test_duplicate_slug_conflicts(self, repo, admin):
        repo.get_by_slug.return_value = _tradeshow()

        with pytest.raises(ConflictError):
            await TradeshowService(repo).create(TradeshowCreateFactory.build(), admin)

        repo.create.assert_not_awaited()

    async def test_created_by_admin(self, repo, admin):
        repo.get_by_slug.return_value = None
        repo.create.side_effect = lambda tradeshow, tags: tradeshow
        data = TradeshowCreateFactory.build()

        tradeshow = await TradeshowService(repo).create(data, admin)

        assert tradeshow.slug == data.slug
        assert tradeshow.created_by == admin.id
        assert tradeshow.is_active is True


class TestGetBySlug:
    async def test_unknown_slug(self, repo):
        repo.get_by_slug.return_value = None

        with pytest.raises(NotFoundError):
            await TradeshowService(repo).get_by_slug("nope")


class TestListForSession:
    """Tests for the dashboard list."""

    async def test_admin_counts_every_submission(self, repo, admin):
        repo.list_for_tenant.return_value = []

        await TradeshowService(repo).list_for_session(admin)

        repo.list_for_tenant.assert_awaited_once_with(admin.tenant_id, rep_id=None)

    async def test_rep_counts_by_user_id(self, repo):
        rep = SessionUserFactory.build(id=12, rep_code=None)
        repo.list_for_tenant.return_value = []

        await TradeshowService(repo).list_for_session(rep)

        repo.list_for_tenant.assert_awaited_once_with(rep.tenant_id, rep_id=12)
