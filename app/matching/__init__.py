from .config import EngineConfig, get_engine_config
from .engine import score
from .matcher import MatchResult, Partition, partition_keywords
from .model import LogisticModel, compute_features, get_default_model
from .normalize import normalize
from .ranking import KeywordLists, rank_keywords, select_keyword_lists
from .resolver import SynonymResolver, get_default_resolver
from .sections import JDBuckets, bucketize_jd, extract_skills_block
from .tokenize import bigrams, is_noisy_token, tokenize
from .weave import build_weave_plan

__all__ = [
    "EngineConfig",
    "get_engine_config",
    "score",
    "MatchResult",
    "Partition",
    "partition_keywords",
    "LogisticModel",
    "compute_features",
    "get_default_model",
    "normalize",
    "KeywordLists",
    "rank_keywords",
    "select_keyword_lists",
    "SynonymResolver",
    "get_default_resolver",
    "JDBuckets",
    "bucketize_jd",
    "extract_skills_block",
    "bigrams",
    "is_noisy_token",
    "tokenize",
    "build_weave_plan",
]
