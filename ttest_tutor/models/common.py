from pydantic import BaseModel
from typing import Any, Optional

class ErrorResponse(BaseModel):
    error: str
    detail: Optional[Any] = None
    row_index: Optional[int] = None
    column: Optional[str] = None

class HealthResponse(BaseModel):
    ok: bool = True
    version: str
