from pydantic import BaseModel, Field
from typing import Optional


class HealthResponse(BaseModel):
    """Liveness report; ``ok`` stays true while the database is unreachable."""

    ok: bool = True
    db: bool = Field(description="Whether `select 1` succeeded against Postgres")
    db_error: Optional[str] = Field(default=None, description="Driver error message when db is false")
    uptime: float = Field(description="Seconds since the application started")
