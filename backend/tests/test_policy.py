from app.policy import can_modify, is_admin
from app.services.auth_service import AuthenticatedUser


def _actor(user_id: int, role: str = "member") -> AuthenticatedUser:
    return AuthenticatedUser(id=user_id, username=f"user{user_id}", role=role)


def test_owner_can_modify():
    assert can_modify(_actor(1), 1)


def test_other_member_cannot_modify():
    assert not can_modify(_actor(2), 1)


def test_admin_can_modify_anything():
    assert can_modify(_actor(2, role="admin"), 1)


def test_is_admin():
    assert is_admin(_actor(1, role="admin"))
    assert not is_admin(_actor(1))
