from contextlib import asynccontextmanager
import logging

from app.matching import get_default_model, get_default_resolver, get_engine_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # fail fast on a broken scoring config or synonym file instead of on the first request
    config = get_engine_config()
    model = get_default_model()
    get_default_resolver()
    logger.info(
        "match_engine_ready model_version=%s feature_set=%s blend_base_weight=%s",
        model.version,
        model.feature_set,
        config.blend_base_weight,
    )
    yield
