import pytest

from licensing.errors import AuthenticationError, InvalidOperationError, NotFoundError, ValidationError


def test_create_user_hashes_password(user_service):
    user = user_service.create_user("alice", "alice@example.com", "pw-123456")
    assert user.user_id > 0
    assert user.role == "User"
    assert user.password != "pw-123456"
    assert user.password.startswith("$argon2")


@pytest.mark.parametrize(
    "args, message",
    [
        (("", "a@example.com", "pw"), "Username is required"),
        (("bob", " ", "pw"), "Email is required"),
        (("bob", "b@example.com", ""), "Password is required"),
    ],
)
def test_create_user_requires_fields(user_service, args, message):
    with pytest.raises(ValidationError) as exc:
        user_service.create_user(*args)
    assert exc.value.message == message


def test_duplicate_username_rejected(user_service):
    user_service.create_user("dup", "d1@example.com", "pw")
    with pytest.raises(InvalidOperationError) as exc:
        user_service.create_user("dup", "d2@example.com", "pw")
    assert exc.value.message == "Username already exists"


def test_authenticate(user_service):
    user_service.create_user("carol", "c@example.com", "open-sesame", role="Admin")
    user = user_service.authenticate("carol", "open-sesame")
    assert user.role == "Admin"
    with pytest.raises(AuthenticationError):
        user_service.authenticate("carol", "nope")
    with pytest.raises(AuthenticationError):
        user_service.authenticate("nobody", "open-sesame")
    with pytest.raises(AuthenticationError):
        user_service.authenticate("", "")


def test_update_rehashes_only_when_password_given(user_service):
    user = user_service.create_user("dave", "d@example.com", "first-pass")
    original_hash = user.password
    user = user_service.update_user(user.user_id, "dave@new.example.com", role="Manager")
    assert user.password == original_hash
    assert user.email == "dave@new.example.com"
    assert user.role == "Manager"

    user_service.update_user(user.user_id, "dave@new.example.com", password="second-pass")
    assert user_service.authenticate("dave", "second-pass").user_id == user.user_id


def test_assign_tenant_and_list_by_tenant(user_service):
    a = user_service.create_user("u1", "u1@example.com", "pw")
    user_service.create_user("u2", "u2@example.com", "pw", tenant_id=4)
    user_service.assign_tenant(a.user_id, 4)
    assert sorted(u.username for u in user_service.list_by_tenant(4)) == ["u1", "u2"]

    with pytest.raises(ValidationError):
        user_service.assign_tenant(a.user_id, 0)
    with pytest.raises(NotFoundError):
        user_service.assign_tenant(999, 4)


def test_user_field_lengths(user_service):
    with pytest.raises(ValidationError) as exc:
        user_service.create_user("u" * 101, "a@example.com", "pw")
    assert exc.value.message == "Username must be at most 100 characters"
    with pytest.raises(ValidationError):
        user_service.create_user("ok", "a@example.com", "pw", role="r" * 51)
    user = user_service.create_user("ok", "a@example.com", "pw")
    with pytest.raises(ValidationError) as exc:
        user_service.update_user(user.user_id, "e" * 321)
    assert exc.value.message == "Email must be at most 320 characters"
