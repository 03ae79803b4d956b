# app/sentiment/api.py
from fastapi import APIRouter, Depends

from app.shared.auth import public
from .schemas import SentimentIn, SentimentOut, HealthOut
from .service import SentimentService, get_sentiment_service

router = APIRouter(prefix="/sentiment", tags=["Sentiment"])

# bodies come back exactly as the downstream sent them, so no response_model filtering
@router.post("/analyze", status_code=201, responses={201: {"model": SentimentOut}})
@public
async def api_analyze(inb: SentimentIn, svc: SentimentService = Depends(get_sentiment_service)):
    return await svc.analyze(inb.text)

@router.get("/health", responses={200: {"model": HealthOut}})
@public
async def api_health(svc: SentimentService = Depends(get_sentiment_service)):
    return await svc.check_health()
