from .loader import load_config
from .models import (
    BlogmdConfig,
    FeedConfig,
    OutputConfig,
)

__all__ = [
    "BlogmdConfig",
    "FeedConfig",
    "OutputConfig",
    "load_config",
]
