"""Unit tests for UserService rep management and settings."""

from unittest.mock import AsyncMock

import pytest

from leadbooth.core.auth.backend import hash_password, verify_password
from leadbooth.core.errors import BadRequestError, ConflictError, NotFoundError
from leadbooth.modules.users.models import User
from leadbooth.modules.users.schemas import RepUpdate, SettingsUpdate
from leadbooth.modules.users.services import UserService
from tests.factories.session import SessionUserFactory


pytestmark = pytest.mark.unit

PASSWORD = "old-password"
PASSWORD_HASH = hash_password(PASSWORD)


def _user(**overrides) -> User:
    values = {
        "id": 5,
        "name": "Riley Rep",
        "email": "riley@acme.example.com",
        "role": "rep",
        "rep_code": "ACME-RILEY",
        "tenant_id": 1,
        "password_hash": PASSWORD_HASH,
    }
    values.update(overrides)
    return User(**values)


@pytest.fixture
def repo() -> AsyncMock:
    repo = AsyncMock()
    repo.update.side_effect = lambda user: user
    repo.get_by_email.return_value = None
    repo.get_by_rep_code.return_value = None
    return repo


@pytest.fixture
def photos() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(repo, photos) -> UserService:
    return UserService(repo, photos)


@pytest.fixture
def admin():
    return SessionUserFactory.build(role="admin", tenant_id=1)


class TestUpdateRep:
    def _data(self, **overrides) -> RepUpdate:
        values = {
            "id": 5,
            "email": "riley@acme.example.com",
            "name": "Riley Rep",
            "rep_code": "ACME-RILEY",
        }
        values.update(overrides)
        return RepUpdate(**values)

    async def test_password_kept_when_not_sent(self, service, repo, admin):
        user = _user()
        old_hash = user.password_hash
        repo.get_by_id.return_value = user

        await service.update_rep(self._data(name="Riley R."), admin)

        assert user.name == "Riley R."
        assert user.password_hash == old_hash

    async def test_own_email_is_not_a_conflict(self, service, repo, admin):
        user = _user()
        repo.get_by_id.return_value = user
        repo.get_by_email.return_value = user

        await service.update_rep(self._data(), admin)

        repo.get_by_rep_code.assert_awaited_once_with("ACME-RILEY", exclude_id=5)

    async def test_email_of_another_user_conflicts(self, service, repo, admin):
        repo.get_by_id.return_value = _user()
        repo.get_by_email.return_value = _user(id=6)

        with pytest.raises(ConflictError):
            await service.update_rep(self._data(), admin)

        repo.update.assert_not_awaited()

    async def test_admin_user_is_not_a_rep(self, service, repo, admin):
        repo.get_by_id.return_value = _user(role="admin")

        with pytest.raises(NotFoundError) as exc_info:
            await service.update_rep(self._data(), admin)

        assert exc_info.value.message == "Rep not found"


class TestDeleteRep:
    async def test_refused_with_submissions(self, service, repo, photos, admin):
        repo.get_by_id.return_value = _user()
        photos.count_by_rep.return_value = 3

        with pytest.raises(BadRequestError) as exc_info:
            await service.delete_rep(5, admin)

        assert exc_info.value.message == (
            "Cannot delete rep with 3 submissions. Consider deactivating instead."
        )
        repo.delete.assert_not_awaited()

    async def test_unknown_rep_reveals_nothing(self, service, repo, photos, admin):
        repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.delete_rep(5, admin)

        repo.get_by_id.assert_awaited_once_with(5, tenant_id=admin.tenant_id)
        photos.count_by_rep.assert_not_awaited()

    async def test_deletes(self, service, repo, photos, admin):
        user = _user()
        repo.get_by_id.return_value = user
        photos.count_by_rep.return_value = 0

        await service.delete_rep(5, admin)

        repo.delete.assert_awaited_once_with(user)


class TestUpdateSettings:
    @pytest.fixture
    def session(self):
        return SessionUserFactory.build(id=5, tenant_id=1)

    async def test_new_password_replaces_hash(self, service, repo, session):
        user = _user()
        repo.get_by_id.return_value = user

        await service.update_settings(
            SettingsUpdate(current_password=PASSWORD, new_password="new-password"), session
        )

        assert verify_password("new-password", user.password_hash)

    async def test_name_changes_with_password(self, service, repo, session):
        user = _user()
        repo.get_by_id.return_value = user

        await service.update_settings(
            SettingsUpdate(
                name="Riley R.", current_password=PASSWORD, new_password="new-password"
            ),
            session,
        )

        assert user.name == "Riley R."

    async def test_wrong_current_password(self, service, repo, session):
        repo.get_by_id.return_value = _user()

        with pytest.raises(BadRequestError) as exc_info:
            await service.update_settings(
                SettingsUpdate(current_password="nope", new_password="new-password"), session
            )

        assert exc_info.value.message == "Current password is incorrect"
        repo.update.assert_not_awaited()

    async def test_same_name_is_no_change(self, service, repo, session):
        repo.get_by_id.return_value = _user()

        with pytest.raises(BadRequestError) as exc_info:
            await service.update_settings(SettingsUpdate(name="Riley Rep"), session)

        assert exc_info.value.message == "No changes to update"

    async def test_aliases_populate_fields(self):
        data = SettingsUpdate.model_validate(
            {"currentPassword": "a", "newPassword": "b"}
        )

        assert data.current_password == "a"
        assert data.new_password == "b"
