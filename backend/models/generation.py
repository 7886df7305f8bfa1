from typing import Optional

from pydantic import BaseModel


class Generation(BaseModel):
    result: str
    used_model: str     # model id from MODEL_CHAIN that produced `result`


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
