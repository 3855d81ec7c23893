"""Unit tests for bearer token generation and verification."""

import pytest
from fastapi import HTTPException

from src.commerce.core.models.principal import Principal, Role
from src.commerce.core.services import JwtService
from src.commerce.runtime.config.config_data import AuthConfig


@pytest.fixture
def auth_config() -> AuthConfig:
    return AuthConfig(signing_secret="unit-test-secret", issuer="issuer.test", audiences=["api.test"])


@pytest.fixture
def service(auth_config) -> JwtService:
    return JwtService(auth_config)


def test_round_trip(service):
    token = service.generate_token("seller-9", roles=[Role.SELLER], name="Acme")

    principal = service.verify_token(token)
    assert principal.subject == "seller-9"
    assert principal.roles == [Role.SELLER]
    assert principal.name == "Acme"
    assert principal.issuer == "issuer.test"
    assert principal.expires_at is not None


def test_unknown_roles_are_dropped(service):
    token = service.generate_token("u1", roles=["customer", "superuser"])
    assert service.verify_token(token).roles == [Role.CUSTOMER]


def test_wrong_secret_rejected(service, auth_config):
    other = JwtService(auth_config.model_copy(update={"signing_secret": "another-secret"}))
    token = other.generate_token("u1", roles=[Role.ADMIN])

    with pytest.raises(HTTPException) as exc_info:
        service.verify_token(token)
    assert exc_info.value.status_code == 401


def test_wrong_audience_rejected(service, auth_config):
    other = JwtService(auth_config.model_copy(update={"audiences": ["someone-else"]}))
    token = other.generate_token("u1", roles=[Role.ADMIN])

    with pytest.raises(HTTPException) as exc_info:
        service.verify_token(token)
    assert exc_info.value.status_code == 401


def test_wrong_issuer_rejected(service, auth_config):
    other = JwtService(auth_config.model_copy(update={"issuer": "elsewhere"}))
    token = other.generate_token("u1", roles=[Role.ADMIN])

    with pytest.raises(HTTPException) as exc_info:
        service.verify_token(token)
    assert exc_info.value.status_code == 401


def test_expired_token_rejected(service):
    token = service.generate_token("u1", roles=[Role.ADMIN], expires_in_seconds=-600)

    with pytest.raises(HTTPException) as exc_info:
        service.verify_token(token)
    assert exc_info.value.status_code == 401


def test_garbage_token_rejected(service):
    with pytest.raises(HTTPException) as exc_info:
        service.verify_token("not-a-token")
    assert exc_info.value.status_code == 401


def test_disallowed_algorithm(service):
    with pytest.raises(HTTPException) as exc_info:
        service.generate_token("u1", roles=[], algorithm="HS512")
    assert exc_info.value.status_code == 500


def test_principal_role_check():
    principal = Principal(subject="u1", roles=[Role.SELLER, Role.CUSTOMER])

    assert principal.has_role(Role.ADMIN, Role.SELLER)
    assert not principal.has_role(Role.DELIVERY)
