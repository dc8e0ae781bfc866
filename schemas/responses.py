from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union


class SuccessResponse(BaseModel):
    success: bool = True
    message: Union[str, float, bool, List[str], Dict[str, Any], None] = Field(None, description="Operation result")
    detail: Optional[Dict[str, Any]] = Field(None, description="Extra result fields")


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
