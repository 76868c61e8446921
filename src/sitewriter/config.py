from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .validators import validate_config_basic


@dataclass
class WriterConfig:
    """Layout options for the generated document."""

    # Spaces (or tabs) per nesting level; None writes a compact document
    indent: Optional[int] = 2
    indent_char: str = " "
    newline: str = "\n"
    # Optional XSL stylesheet href, written as <?xml-stylesheet?>
    stylesheet: Optional[str] = None

    def __post_init__(self) -> None:
        errors = validate_config_basic(asdict(self))
        if errors:
            raise ValueError("Invalid writer config:\n" + "\n".join(f"  - {e}" for e in errors))


def config_from_dict(data: Dict[str, Any]) -> WriterConfig:
    errors = validate_config_basic(data)
    if errors:
        raise ValueError("Invalid writer config:\n" + "\n".join(f"  - {e}" for e in errors))

    defaults = WriterConfig()
    return WriterConfig(
        indent=data.get("indent", defaults.indent),
        indent_char=str(data.get("indent_char", defaults.indent_char)),
        newline=str(data.get("newline", defaults.newline)),
        stylesheet=data.get("stylesheet"),
    )


def _load_raw_config(path: Path) -> Dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")
    return data


def load_config(path: Path) -> WriterConfig:
    """
    Load writer options from a YAML file.

    The options may sit under a top-level `writer:` key or at the root:

        writer:
          indent: 4
          stylesheet: "/sitemap.xsl"
    """
    raw = _load_raw_config(Path(path))
    section = raw["writer"] if "writer" in raw else raw
    return config_from_dict(section or {})
