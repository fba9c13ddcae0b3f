"""
Authentication: Supabase JWT validation and current user dependency.

Users live entirely in Supabase; we verify the access token the client
already holds and expose its claims as a CurrentUser for the request.

Supabase signs JWTs with either:
- RS256/ES256 (asymmetric): verified against the project's JWKS.
- HS256 (legacy): verified with SUPABASE_JWT_SECRET.
"""

import logging
from functools import lru_cache
from typing import Annotated, Any

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import PyJWKClient

from event_timeline.config import Settings, get_settings
from event_timeline.models.user import CurrentUser

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=True)

ASYMMETRIC_ALGORITHMS = ("RS256", "ES256")


class AuthConfigError(Exception):
    """Token cannot be checked because the server is missing auth settings."""


@lru_cache
def _jwks_client(supabase_url: str) -> PyJWKClient:
    """One JWKS client per project URL; it caches fetched signing keys."""
    base = (supabase_url or "").rstrip("/")
    if not base or "your-project" in base:
        raise AuthConfigError("Set SUPABASE_URL in .env to your project URL (e.g. https://xxx.supabase.co)")
    return PyJWKClient(f"{base}/auth/v1/.well-known/jwks.json")


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Verify a Supabase access token and return its claims.
    Raises jwt.PyJWTError for bad tokens, AuthConfigError when the
    matching verification key is not configured.
    """
    alg = jwt.get_unverified_header(token).get("alg")
    if alg in ASYMMETRIC_ALGORITHMS:
        key = _jwks_client(settings.supabase_url).get_signing_key_from_jwt(token).key
        algorithms = list(ASYMMETRIC_ALGORITHMS)
    elif alg == "HS256":
        if not settings.supabase_jwt_secret:
            raise AuthConfigError("Authentication not configured (SUPABASE_JWT_SECRET required for HS256).")
        key = settings.supabase_jwt_secret
        algorithms = ["HS256"]
    else:
        raise jwt.InvalidAlgorithmError(f"Unsupported token algorithm: {alg}")
    return jwt.decode(token, key, algorithms=algorithms, options={"verify_aud": False})


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CurrentUser:
    """
    Dependency: validate the bearer token and return the caller's identity.
    """
    try:
        payload = decode_token(credentials.credentials, settings)
    except AuthConfigError as e:
        logger.warning("Auth misconfigured: %s", e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token has expired")
    except jwt.PyJWTError as e:
        logger.warning("JWT verification failed: %s", e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    # Standard JWT claims: sub = subject (user id in Supabase)
    subject = payload.get("sub")
    if not subject:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token missing subject")

    return CurrentUser(id=subject, email=payload.get("email"), role=payload.get("role"))
