"""
AuthService: built-in accounts, tenant email login, persisted session
"""
from config.constants import STORAGE
from services.auth_service import AuthService, is_valid_session_id


class TestLogin:
    def test_admin_login(self, auth):
        assert auth.login("admin@rentease.com", "admin123")
        user = auth.current_user
        assert user.role == "admin"
        assert user.is_admin
        assert auth.home_path() == "/admin"

    def test_builtin_tenant_login(self, auth):
        assert auth.login("tenant@rentease.com", "tenant123")
        user = auth.current_user
        assert user.role == "tenant"
        assert user.room_number == 101
        assert auth.home_path() == "/tenant"

    def test_wrong_password(self, auth):
        assert not auth.login("admin@rentease.com", "wrong")
        assert not auth.is_authenticated
        assert auth.home_path() == "/login"

    def test_unknown_email(self, auth):
        assert not auth.login("nobody@example.com", "whatever")
        assert auth.current_user is None

    def test_password_not_kept_on_user(self, auth):
        auth.login("admin@rentease.com", "admin123")
        assert "password" not in auth.current_user.model_dump()
        assert "admin123" not in auth.storage.get_item(auth.session_key)

    def test_stored_tenant_logs_in_with_any_password(self, empty_store, auth, tenant_payload):
        tenant = empty_store.add_tenant(tenant_payload(email="tenant-created@example.com"))

        assert auth.login("tenant-created@example.com", "anything")
        user = auth.current_user
        assert user.id == tenant.id
        assert user.name == "Asha Iyer"
        assert user.role == "tenant"
        assert user.room_number == 101

    def test_first_matching_tenant_wins(self, empty_store, auth, tenant_payload):
        first = empty_store.add_tenant(tenant_payload(email="shared@example.com"))
        empty_store.add_tenant(tenant_payload(email="shared@example.com", room_number=102))

        assert auth.login("shared@example.com", "")
        assert auth.current_user.id == first.id

    def test_builtin_checked_before_tenants(self, seeded_store, auth):
        assert auth.login("priya@gmail.com", "tenant123")
        assert auth.current_user.id == "3"

    def test_seeded_tenant_email(self, seeded_store, auth):
        assert auth.login("tenant7@gmail.com", "")
        assert auth.current_user.id == "tenant_7"


class TestSession:
    def test_session_survives_reload_with_same_id(self, storage, auth):
        auth.login("admin@rentease.com", "admin123")
        again = AuthService(storage, auth.session_id)
        assert again.is_authenticated
        assert again.current_user.email == "admin@rentease.com"

    def test_other_browser_does_not_inherit_login(self, storage, auth):
        auth.login("admin@rentease.com", "admin123")

        stranger = AuthService(storage)
        assert stranger.session_id != auth.session_id
        assert not stranger.is_authenticated
        assert stranger.current_user is None

    def test_two_browsers_keep_separate_users(self, storage):
        admin = AuthService(storage)
        tenant = AuthService(storage)
        admin.login("admin@rentease.com", "admin123")
        tenant.login("tenant@rentease.com", "tenant123")

        assert AuthService(storage, admin.session_id).current_user.role == "admin"
        assert AuthService(storage, tenant.session_id).current_user.role == "tenant"

    def test_session_key_is_scoped(self, auth):
        auth.login("admin@rentease.com", "admin123")
        assert auth.session_key == f"{STORAGE.USER}_{auth.session_id}"
        assert STORAGE.USER not in auth.storage.keys()

    def test_invalid_session_id_gets_fresh_one(self, storage):
        auth = AuthService(storage, "../etc/passwd")
        assert is_valid_session_id(auth.session_id)
        assert auth.session_id != "../etc/passwd"
        assert not auth.is_authenticated

    def test_is_valid_session_id(self):
        assert is_valid_session_id("0123456789abcdef0123456789abcdef")
        assert not is_valid_session_id(None)
        assert not is_valid_session_id("")
        assert not is_valid_session_id("XYZ")

    def test_logout_clears_session(self, storage, auth):
        auth.login("admin@rentease.com", "admin123")
        auth.logout()
        assert not auth.is_authenticated
        assert auth.session_key not in storage.keys()
        assert not AuthService(storage, auth.session_id).is_authenticated

    def test_logout_only_affects_own_session(self, storage, auth):
        other = AuthService(storage)
        other.login("admin@rentease.com", "admin123")
        auth.login("tenant@rentease.com", "tenant123")

        auth.logout()
        assert AuthService(storage, other.session_id).is_authenticated

    def test_logout_when_signed_out(self, auth):
        auth.logout()
        assert auth.current_user is None

    def test_corrupt_session_treated_as_signed_out(self, storage, auth):
        storage.set_item(auth.session_key, '{"email": "x"}')
        assert not AuthService(storage, auth.session_id).is_authenticated

    def test_current_user_is_a_copy(self, auth):
        auth.login("admin@rentease.com", "admin123")
        user = auth.current_user
        user.name = "Changed"
        assert auth.current_user.name == "Admin User"
