"""Unit tests for the JWT and bcrypt services."""

from datetime import date

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.errors import AuthenticationError
from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService

SECRET = "k" * 32
ISSUER = "http://restaurantapi.com"


@pytest.mark.unit
class TestJWTService:
    def test_short_secret_is_rejected(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="short", issuer=ISSUER)

    def test_token_carries_identity_and_claims(self):
        service = JWTService(secret_key=SECRET, issuer=ISSUER)
        user_id = uuid7()

        token = service.generate_access_token(
            user_id=user_id,
            email="user@example.com",
            roles=["Manager"],
            nationality="German",
            date_of_birth=date(1990, 5, 17),
        )
        result = service.validate_access_token(token)

        assert isinstance(result, Success)
        payload = result.value
        assert payload["sub"] == str(user_id)
        assert payload["email"] == "user@example.com"
        assert payload["roles"] == ["Manager"]
        assert payload["nationality"] == "German"
        assert payload["date_of_birth"] == "1990-05-17"
        assert payload["iss"] == ISSUER
        assert payload["aud"] == ISSUER

    def test_optional_claims_omitted(self):
        service = JWTService(secret_key=SECRET, issuer=ISSUER)

        token = service.generate_access_token(
            user_id=uuid7(), email="user@example.com", roles=["User"]
        )
        payload = service.validate_access_token(token).value

        assert "nationality" not in payload
        assert "date_of_birth" not in payload

    def test_expires_in_seconds(self):
        service = JWTService(secret_key=SECRET, issuer=ISSUER, expiration_days=15)

        assert service.expires_in_seconds == 15 * 24 * 3600

    def test_expired_token(self):
        service = JWTService(secret_key=SECRET, issuer=ISSUER, expiration_days=1)
        with freeze_time("2026-01-01 12:00:00"):
            token = service.generate_access_token(
                user_id=uuid7(), email="user@example.com", roles=["User"]
            )

        with freeze_time("2026-01-03 12:00:00"):
            result = service.validate_access_token(token)

        assert result == Failure(error=AuthenticationError.EXPIRED_TOKEN)

    def test_wrong_issuer_is_invalid(self):
        issuing = JWTService(secret_key=SECRET, issuer="http://elsewhere.com")
        validating = JWTService(secret_key=SECRET, issuer=ISSUER)
        token = issuing.generate_access_token(
            user_id=uuid7(), email="user@example.com", roles=["User"]
        )

        assert validating.validate_access_token(token) == Failure(
            error=AuthenticationError.INVALID_TOKEN
        )

    def test_wrong_signature_is_invalid(self):
        service = JWTService(secret_key=SECRET, issuer=ISSUER)
        forged = jwt.encode(
            {"sub": str(uuid7()), "iss": ISSUER, "aud": ISSUER, "iat": 0, "exp": 4102444800},
            "x" * 32,
            algorithm="HS256",
        )

        assert service.validate_access_token(forged) == Failure(
            error=AuthenticationError.INVALID_TOKEN
        )

    def test_garbage_is_invalid(self):
        service = JWTService(secret_key=SECRET, issuer=ISSUER)

        assert isinstance(service.validate_access_token("not-a-jwt"), Failure)


@pytest.mark.unit
class TestBcryptPasswordService:
    @pytest.mark.parametrize("cost", [3, 32])
    def test_cost_out_of_range(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)

    def test_hash_and_verify(self):
        service = BcryptPasswordService(cost_factor=4)

        password_hash = service.hash_password("password123")

        assert password_hash.startswith("$2b$04$")
        assert len(password_hash) == 60
        assert service.verify_password("password123", password_hash)
        assert not service.verify_password("password124", password_hash)

    def test_same_password_different_salt(self):
        service = BcryptPasswordService(cost_factor=4)

        assert service.hash_password("password123") != service.hash_password(
            "password123"
        )

    def test_malformed_hash_is_mismatch(self):
        service = BcryptPasswordService(cost_factor=4)

        assert service.verify_password("password123", "not-a-hash") is False
