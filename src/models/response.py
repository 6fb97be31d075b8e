"""Common response bodies."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned with every 4xx/5xx answer."""

    error: str
