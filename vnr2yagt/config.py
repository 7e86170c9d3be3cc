#!/usr/bin/env python3
"""
Converter configuration.

Defaults reproduce the VNR → Yagt conversion as shipped; a YAML file can
override them:

```yaml
source_languages: [ja]
term_type: trans
min_pattern_length: 2
output: shareddict.json
```
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Union

import yaml

DEFAULT_OUTPUT_PATH = "shareddict.json"


@dataclass
class ConverterConfig:
    """Tunables for term filtering and output."""
    source_languages: list[str] = field(default_factory=lambda: ["ja"])
    term_type: str = "trans"
    min_pattern_length: int = 2
    output: str = DEFAULT_OUTPUT_PATH

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConverterConfig":
        """Create from dictionary, rejecting unknown keys and wrong types."""
        defaults = cls().to_dict()
        unknown = sorted(str(k) for k in set(data) - set(defaults))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        # Accept a bare string for a single source language
        if isinstance(data.get("source_languages"), str):
            data = {**data, "source_languages": [data["source_languages"]]}

        for key, value in data.items():
            expected = type(defaults[key])
            # bool is an int subclass, never a valid length
            if not isinstance(value, expected) or isinstance(value, bool):
                raise ValueError(f"Config key '{key}' must be {expected.__name__}, got {type(value).__name__}")

        langs = data.get("source_languages")
        if langs is not None and (not langs or not all(isinstance(lang, str) and lang for lang in langs)):
            raise ValueError("Config key 'source_languages' must be a non-empty list of language codes")

        if data.get("min_pattern_length", 1) < 1:
            raise ValueError("Config key 'min_pattern_length' must be at least 1")
        if data.get("term_type") == "":
            raise ValueError("Config key 'term_type' must not be empty")

        return cls(**data)


def load_config(path: Union[str, Path]) -> ConverterConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to a .yaml/.yml file

    Returns:
        ConverterConfig with file values over the defaults

    Raises:
        ValueError: on invalid YAML, a non-mapping root or bad keys
    """
    content = Path(path).read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}")

    # Empty file
    if data is None:
        return ConverterConfig()

    if not isinstance(data, dict):
        raise ValueError("YAML root must be a mapping")

    return ConverterConfig.from_dict(data)
