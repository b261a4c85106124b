from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.config_validator import get_config

config = get_config()


def build_engine(database_url: str, **overrides):
    """Create the async engine for the given DSN."""
    engine_kwargs = config.get_database_config()
    if database_url.startswith("sqlite"):
        engine_kwargs.pop("pool_pre_ping", None)
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        # Every connection to ":memory:" is a new database unless the pool shares one
        if ":memory:" in database_url:
            engine_kwargs["poolclass"] = StaticPool
    engine_kwargs.update(overrides)
    return create_async_engine(database_url, **engine_kwargs)


engine = build_engine(config.DATABASE_URL or "sqlite+aiosqlite:///:memory:")

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


# Dependency for FastAPI (async)
async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
