"""Bearer token generation and verification."""

import time
from typing import Any

from authlib.jose import JoseError, JsonWebToken
from fastapi import HTTPException
from loguru import logger
from pydantic import ValidationError

from src.commerce.core.models.principal import Principal, Role
from src.commerce.runtime.config.config_data import AuthConfig
from src.commerce.runtime.context import get_config


class JwtService:
    """Issue and verify HMAC-signed role tokens for the four apps."""

    def __init__(self, auth_config: AuthConfig | None = None):
        self._config = auth_config or get_config().auth
        self._jwt = JsonWebToken(self._config.allowed_algorithms)

    def generate_token(
        self,
        subject: str,
        roles: list[Role] | list[str],
        expires_in_seconds: int | None = None,
        name: str | None = None,
        algorithm: str | None = None,
    ) -> str:
        """Sign a token for ``subject`` carrying ``roles``.

        Raises:
            HTTPException: If the algorithm is not allowed or signing fails
        """
        from authlib.common.security import generate_token

        cfg = self._config
        algorithm = algorithm or cfg.allowed_algorithms[0]
        if algorithm not in cfg.allowed_algorithms:
            raise HTTPException(status_code=500, detail=f"Algorithm {algorithm} not allowed")

        now = int(time.time())
        payload: dict[str, Any] = {
            "iss": cfg.issuer,
            "sub": subject,
            "aud": cfg.audiences,
            "exp": now + (expires_in_seconds or cfg.token_ttl_seconds),
            "iat": now,
            "nbf": now,
            "jti": generate_token(16),
            cfg.roles_claim: [str(role) for role in roles],
        }
        if name:
            payload["name"] = name

        try:
            token = self._jwt.encode({"alg": algorithm, "typ": "JWT"}, payload, cfg.signing_secret)
        except JoseError as e:
            raise HTTPException(status_code=500, detail=f"JWT encoding failed: {e}") from e
        return token.decode() if isinstance(token, bytes) else token

    def verify_token(self, token: str) -> Principal:
        """Verify signature and registered claims, then build the caller's ``Principal``.

        Raises:
            HTTPException: 401 for any invalid, expired or foreign token
        """
        cfg = self._config
        claims_options = {
            "iss": {"essential": True, "values": [cfg.issuer]},
            "aud": {"essential": True, "values": list(cfg.audiences)},
            "sub": {"essential": True},
        }
        try:
            claims = self._jwt.decode(token, cfg.signing_secret, claims_options=claims_options)
            claims.validate(leeway=cfg.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug("Rejected bearer token: {}", exc)
            raise HTTPException(status_code=401, detail=f"JWT error: {exc}") from exc

        raw_roles = claims.get(cfg.roles_claim) or []
        if isinstance(raw_roles, str):
            raw_roles = raw_roles.split()
        roles = [role for role in raw_roles if role in Role._value2member_map_]

        try:
            return Principal(
                subject=str(claims["sub"]),
                roles=roles,
                name=claims.get("name"),
                issuer=claims.get("iss", ""),
                expires_at=claims.get("exp"),
            )
        except ValidationError as exc:
            raise HTTPException(status_code=401, detail="Invalid token claims") from exc
