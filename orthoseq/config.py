"""
Run settings for the gestimator pipeline, optionally read from YAML.

Example ``gestimator.yaml``::

    max_hits: 5
    hit_order: distance
    remove_all_gaps: true
"""

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Union

import yaml

from orthoseq.errors import FileError


@dataclass(frozen=True)
class GEstimatorConfig:
    file_out: str = ""
    max_hits: int = 3
    verbose: bool = False
    remove_all_gaps: bool = False
    hit_order: str = "file"

    def update(self, **overrides) -> "GEstimatorConfig":
        """Copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def as_kwargs(self) -> dict:
        return asdict(self)


def load_config(path: Union[str, Path]) -> GEstimatorConfig:
    """
    Read gestimator settings from a YAML mapping.

    Raises:
        FileError: if the file cannot be read
        ValueError: for malformed YAML, a non-mapping document or unknown keys
    """
    path = Path(path)
    try:
        with open(path) as f:
            cfg = yaml.safe_load(f)
    except OSError as e:
        raise FileError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid config {path}: {e}") from e

    if cfg is None:
        return GEstimatorConfig()
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a mapping")

    known = {field.name for field in fields(GEstimatorConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    return GEstimatorConfig(**cfg)
