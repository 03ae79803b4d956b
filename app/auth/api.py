# app/auth/api.py
from typing import Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.shared.auth import create_access_token, current_user, current_public_key, public
from app.shared.config import settings

router = APIRouter(prefix="/auth", tags=["Auth"])

class TokenIn(BaseModel):
    username: str = Field(min_length=1)
    stellar_public_key: Optional[str] = None

@router.post("/token")
@public
def api_token(inb: TokenIn):
    if settings.AUTH_DEMO:
        # return the demo token; user pastes it in Authorize
        return {"access_token": settings.DEMO_TOKEN, "token_type": "bearer", "demo": True}
    token = create_access_token(sub=inb.username, stellar_public_key=inb.stellar_public_key)
    return {"access_token": token, "token_type": "bearer", "demo": False}

@router.get("/me")
def api_me(user=Depends(current_user), public_key=Depends(current_public_key)):
    return {"ok": True, "user": user, "public_key": public_key}
