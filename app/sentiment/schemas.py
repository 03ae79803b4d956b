from pydantic import BaseModel, Field
from typing import Optional

class SentimentIn(BaseModel):
    # blank/missing text is rejected by the service with a 400, not by validation
    text: Optional[str] = None

class SentimentOut(BaseModel):
    sentiment: float = Field(description="Score from -1 (negative) to 1 (positive)")

class HealthOut(BaseModel):
    status: str
    timestamp: str
    service: str
