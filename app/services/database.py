from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, scoped_session
from app.config.settings import settings

_url = settings.database_url

# pool sizing only applies to server databases (sqlite uses a single-connection pool)
_pool_options = {} if _url.startswith("sqlite") else {
    "pool_size": 10,
    "max_overflow": 20,
    "pool_timeout": 30,
}

engine = create_engine(
    _url,
    pool_pre_ping=True,
    echo=False,
    **_pool_options,
)

# session factory (scoped session if multithreaded or async)
SessionLocal = scoped_session(sessionmaker(autocommit=False, autoflush=False, bind=engine))
