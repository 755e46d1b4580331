"""
Pydantic schemas for API request/response validation.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class ConvertRequest(BaseModel):
    """Request to convert an error description into a platform query"""
    naturalLanguage: Optional[str] = Field(None, description="Natural language description of the error")
    input: Optional[str] = Field(None, description="Alias of naturalLanguage")
    platform: str = Field(..., description="sentry | datadog | elasticsearch | splunk")

    class Config:
        json_schema_extra = {
            "example": {
                "naturalLanguage": "Show me all 500 errors from the API service",
                "platform": "sentry"
            }
        }

    @property
    def text(self) -> Optional[str]:
        return self.naturalLanguage if self.naturalLanguage is not None else self.input


class ErrorDetail(BaseModel):
    """Tagged error value"""
    message: str
    code: str


class ConvertResponse(BaseModel):
    """Generated query"""
    platform: str
    query: str
    originalInput: str
    timestamp: int
    reasoning: Optional[str] = None
    validationError: Optional[ErrorDetail] = None


class ValidateRequest(BaseModel):
    """Request to validate a query"""
    query: Optional[str] = ""
    platform: str


class ValidateResponse(BaseModel):
    """Validation outcome"""
    valid: bool
    error: Optional[ErrorDetail] = None


class HistoryItem(BaseModel):
    """Stored conversion"""
    id: int
    input: str
    platform: str
    query: str
    timestamp: int

    class Config:
        from_attributes = True


class HistoryResponse(BaseModel):
    history: List[HistoryItem]


class ClearHistoryResponse(BaseModel):
    cleared: int


class PlatformInfo(BaseModel):
    """Catalogue entry for a supported platform"""
    id: str
    name: str
    description: str
    exampleQuery: str


class PlatformListResponse(BaseModel):
    platforms: List[PlatformInfo]


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: str
    environment: str
