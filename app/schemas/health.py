from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    database: str
