from pydantic import BaseModel
from typing import List, Optional

class GeneratePayload(BaseModel):
    ingredients: str
    api_key: Optional[str] = None
    allergies: Optional[str] = None
    cuisines: Optional[List[str]] = None

class RoundAccepted(BaseModel):
    round_id: str
    status: str = "cooking"
