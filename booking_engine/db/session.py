"""Async Postgres engine, used only to answer the liveness probe"""
import logging
import ssl
from typing import Optional
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from booking_engine.core.config import settings
from booking_engine.core.metrics import db_connected

logger = logging.getLogger(__name__)

engine: Optional[AsyncEngine] = None


class DatabaseStatus(BaseModel):
    ok: bool
    error: Optional[str] = None


def _ssl_context() -> ssl.SSLContext:
    # Managed Postgres hosts present certificates we do not pin
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


def get_engine() -> AsyncEngine:
    global engine
    if engine is None:
        connect_args = {"timeout": settings.DB_CONNECT_TIMEOUT}
        if settings.PGSSL:
            connect_args["ssl"] = _ssl_context()
        engine = create_async_engine(
            settings.database_url,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
    return engine


async def close_engine():
    global engine
    if engine is not None:
        await engine.dispose()
        engine = None


async def check_database() -> DatabaseStatus:
    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("select 1"))
    except Exception as e:
        logger.warning(f"Database ping failed: {e}")
        db_connected.set(0)
        return DatabaseStatus(ok=False, error=str(e) or type(e).__name__)
    db_connected.set(1)
    return DatabaseStatus(ok=True)
