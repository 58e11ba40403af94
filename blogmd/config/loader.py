"""Config loading for blogmd.

A config file is looked up on the command line, then in the project
directory, then in the user's home. Relative ``feed.path`` and
``output.base_dir`` values set in a file are taken relative to that file.
"""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import BlogmdConfig

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def config_candidates(cli_path: str | None = None) -> list[Path]:
    """Config files to try, highest precedence first."""
    candidates = [Path("blogmd.yaml"), Path.home() / ".blogmd" / "config.yaml"]
    if cli_path:
        candidates.insert(0, Path(cli_path))
    return candidates


def load_config(cli_path: str | None = None) -> BlogmdConfig:
    """Return the first non-empty config found, or the defaults."""
    for path in config_candidates(cli_path):
        if not path.is_file():
            continue
        cfg = _load_file(path)
        if cfg is not None:
            return _anchor_paths(cfg, path.parent)
    return BlogmdConfig()


def _load_file(path: Path) -> BlogmdConfig | None:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    try:
        return BlogmdConfig.model_validate(_expand_env_vars(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def _anchor_paths(cfg: BlogmdConfig, base: Path) -> BlogmdConfig:
    """Rebase relative paths the file set explicitly onto ``base``.

    Defaults the file did not mention stay relative to the working directory.
    """
    feed, output = cfg.feed, cfg.output
    if "path" in feed.model_fields_set:
        feed = feed.model_copy(update={"path": _rebase(feed.path, base)})
    if "base_dir" in output.model_fields_set:
        output = output.model_copy(update={"base_dir": _rebase(output.base_dir, base)})
    return cfg.model_copy(update={"feed": feed, "output": output})


def _rebase(value: str, base: Path) -> str:
    path = Path(value)
    return value if path.is_absolute() else str(base / path)


def _expand_env_vars(obj: object) -> object:
    """Substitute ${VAR} in every string of a loaded YAML tree; unset vars become ''."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(value) for value in obj]
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    return obj


# Default YAML template for `blogmd config init`
DEFAULT_CONFIG_TEMPLATE = """\
# blogmd.yaml

# Input feed
feed:
  path: "data/content.xml"     # RSS export with content:encoded bodies

# Output
output:
  base_dir: "output"
  extension: ".md"
  dry_run: false               # compute file names without writing

# Logging
log_level: "info"              # debug | info | warn | error
"""
