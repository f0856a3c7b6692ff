"""Unit tests for password hashing, session tokens and the credential checks."""
import base64
import json
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.config import ALGORITHM, SECRET_KEY
from app.exceptions import InvalidToken, Unauthorized
from app.models.admin_model import Admin
from app.schemas.user_schema import Role, UserCreate
from app.security.auth import (
    authenticate_admin,
    authenticate_user,
    create_access_token,
    get_password_hash,
    verify_password,
    verify_token,
)
from app.services.admin_crud import admin_crud
from app.services.user_crud import user_crud


class TestPasswordHashing:
    def test_password_hash_and_verify(self):
        hashed = get_password_hash("secret1")

        assert hashed != "secret1"
        assert hashed.startswith("$2b$10$")
        assert verify_password("secret1", hashed) is True
        assert verify_password("secret2", hashed) is False

    def test_same_password_different_hashes(self):
        hash1 = get_password_hash("secret1")
        hash2 = get_password_hash("secret1")

        assert hash1 != hash2
        assert verify_password("secret1", hash1) is True
        assert verify_password("secret1", hash2) is True


class TestSessionTokens:
    def test_issue_and_verify(self):
        token, expires_at = create_access_token(7, Role.user, extra_claims={"email": "ann@x.com"})

        claims = verify_token(token)
        assert claims.subject_id == 7
        assert claims.role == Role.user
        assert claims.email == "ann@x.com"
        assert abs(claims.expires_at - expires_at) < timedelta(seconds=1)

    def test_default_lifetime_is_24_hours(self):
        before = datetime.now(timezone.utc)
        _, expires_at = create_access_token(1, Role.admin)

        assert timedelta(hours=23, minutes=59) < expires_at - before <= timedelta(hours=24, seconds=5)

    def test_expired_token_rejected(self):
        token, _ = create_access_token(1, Role.admin, expires_delta=timedelta(hours=-1))

        with pytest.raises(InvalidToken):
            verify_token(token)

    def test_token_signed_with_other_secret_rejected(self):
        token = jwt.encode(
            {"sub": "1", "role": "admin", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "some-other-secret",
            algorithm=ALGORITHM,
        )

        with pytest.raises(InvalidToken):
            verify_token(token)

    def test_tampered_payload_rejected(self):
        token, _ = create_access_token(5, Role.user)
        header, _, signature = token.split(".")
        forged_claims = {
            "sub": "5",
            "role": "admin",
            "exp": int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp()),
        }
        forged_payload = base64.urlsafe_b64encode(json.dumps(forged_claims).encode()).rstrip(b"=").decode()

        with pytest.raises(InvalidToken):
            verify_token(".".join([header, forged_payload, signature]))

    def test_malformed_token_rejected(self):
        with pytest.raises(InvalidToken):
            verify_token("invalid.token.here")

    def test_unknown_role_rejected(self):
        token = jwt.encode(
            {"sub": "1", "role": "superuser", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            SECRET_KEY,
            algorithm=ALGORITHM,
        )

        with pytest.raises(InvalidToken):
            verify_token(token)

    def test_missing_subject_rejected(self):
        token = jwt.encode(
            {"role": "admin", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            SECRET_KEY,
            algorithm=ALGORITHM,
        )

        with pytest.raises(InvalidToken):
            verify_token(token)


class TestCredentialStore:
    def test_authenticate_user(self, db_session):
        user_crud.create_user(db_session, UserCreate(name="Ann Lee", email="ann@x.com", password="secret1"))

        user = authenticate_user(db_session, "ann@x.com", "secret1")
        assert user.email == "ann@x.com"
        assert user.password_hash != "secret1"

    def test_authenticate_user_wrong_password(self, db_session):
        user_crud.create_user(db_session, UserCreate(name="Ann Lee", email="ann@x.com", password="secret1"))

        with pytest.raises(Unauthorized):
            authenticate_user(db_session, "ann@x.com", "wrong-password")

    def test_authenticate_unknown_user(self, db_session):
        with pytest.raises(Unauthorized) as exc_info:
            authenticate_user(db_session, "nobody@x.com", "secret1")

        assert exc_info.value.status_code == 401

    def test_authenticate_admin(self, db_session):
        admin_crud.ensure_admin(db_session, "first-password")

        assert authenticate_admin(db_session, "first-password").username == "admin"
        with pytest.raises(Unauthorized):
            authenticate_admin(db_session, "admin123")

    def test_ensure_admin_keeps_single_row(self, db_session):
        first = admin_crud.ensure_admin(db_session, "first-password")
        second = admin_crud.ensure_admin(db_session, "second-password")

        assert first.id == second.id
        # The existing password is not overwritten by a later seed
        assert authenticate_admin(db_session, "first-password").id == first.id
        assert db_session.query(Admin).count() == 1
