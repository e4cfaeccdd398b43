import logging
from contextlib import asynccontextmanager

from app.core.config.scoring import get_scoring_config, scoring_config_path

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup, not on the first request, when the thresholds file is broken.
    config = get_scoring_config()
    logger.info("scoring_config_loaded path=%s sections=%s", scoring_config_path(), sorted(config))
    yield
    logger.info("app_shutdown")
