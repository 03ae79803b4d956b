# app/shared/auth.py
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError  # python-jose[cryptography]

from app.shared.config import settings
from app.shared.http import Unauthorized

bearer = HTTPBearer(auto_error=False, scheme_name="bearerAuth")

PUBLIC_ATTR = "__auth_public__"

def public(endpoint: Callable) -> Callable:
    """Mark a route endpoint as public: auth_guard lets it through without a token."""
    setattr(endpoint, PUBLIC_ATTR, True)
    return endpoint

def is_public(endpoint: Optional[Callable]) -> bool:
    return bool(getattr(endpoint, PUBLIC_ATTR, False))

def create_access_token(
    sub: str,
    tier: str = "free",
    role: str = "user",
    stellar_public_key: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
    minutes: Optional[int] = None,
) -> str:
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=minutes or settings.JWT_EXPIRE_MIN)
    payload: Dict[str, Any] = {
        "sub": sub,
        "tier": tier,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    if stellar_public_key:
        payload["stellar_public_key"] = stellar_public_key
    if settings.JWT_ISS:
        payload["iss"] = settings.JWT_ISS
    if settings.JWT_AUD:
        payload["aud"] = settings.JWT_AUD
    if extra:
        payload.update(extra)
    return jwt.encode(payload, settings.JWT_KEY, algorithm=settings.JWT_ALG)

def decode_user(token: str) -> Dict[str, Any]:
    # Demo shortcut (strict: must match DEMO_TOKEN exactly)
    if settings.AUTH_DEMO and token == settings.DEMO_TOKEN:
        return {"sub": "demo-user", "tier": "free", "role": "user", "mode": "demo", "stellar_public_key": None}

    try:
        payload = jwt.decode(
            token,
            settings.JWT_KEY,
            algorithms=[settings.JWT_ALG],
            audience=settings.JWT_AUD,
            issuer=settings.JWT_ISS,
            options={
                "verify_aud": bool(settings.JWT_AUD),
                "verify_iss": bool(settings.JWT_ISS),
            },
        )
    except JWTError as e:
        raise Unauthorized(f"invalid token: {e}")

    sub = payload.get("sub")
    if not sub:
        raise Unauthorized("invalid token: missing sub")

    return {
        "sub": sub,
        "tier": payload.get("tier", "free"),
        "role": payload.get("role", "user"),
        "mode": "jwt",
        "stellar_public_key": payload.get("stellar_public_key"),
    }

def auth_guard(request: Request, creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer)):
    """
    App-wide dependency. Runs after routing, so the matched endpoint is known:
    public endpoints pass untouched, everything else needs a bearer token and
    gets the decoded user stored on request.state.user.
    """
    if is_public(request.scope.get("endpoint")):
        request.state.user = None
        return
    if not creds:
        raise Unauthorized("missing bearer token")
    request.state.user = decode_user(creds.credentials)

def current_user(request: Request) -> Optional[Dict[str, Any]]:
    return getattr(request.state, "user", None)

def current_public_key(request: Request) -> Optional[str]:
    user = current_user(request)
    return user.get("stellar_public_key") if user else None
