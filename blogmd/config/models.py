from pydantic import BaseModel, Field
from typing import Literal


class FeedConfig(BaseModel):
    path: str = "data/content.xml"


class OutputConfig(BaseModel):
    base_dir: str = "output"
    extension: str = ".md"
    dry_run: bool = False


class BlogmdConfig(BaseModel):
    feed: FeedConfig = Field(default_factory=FeedConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
