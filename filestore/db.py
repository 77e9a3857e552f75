import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from filestore.settings import settings

logger = logging.getLogger(__name__)

_engine: Engine | None = None


def _get_url() -> str:
    """Return the configured URL, pinning bare ``mysql://`` to the PyMySQL driver."""
    url = make_url(settings.db_url)
    if url.drivername == "mysql":
        url = url.set(drivername="mysql+pymysql")
    return url.render_as_string(hide_password=False)


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        url = _get_url()
        kwargs: dict = {"pool_pre_ping": True}
        if not url.startswith("sqlite"):
            kwargs["pool_size"] = settings.db_pool_size
            kwargs["pool_recycle"] = 1800
        _engine = create_engine(url, **kwargs)
        logger.info("Database engine created (pool_size=%s)", kwargs.get("pool_size", "default"))
    return _engine


def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
        logger.info("Database engine disposed")
