from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Uniform error envelope returned for domain errors"""
    message: str
    error: str
