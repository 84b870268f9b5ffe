"""Supported target languages and their static configuration (languages.yaml)."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml

from typhoon_bindgen.errors import UnsupportedLanguageError

CONFIG_PATH = Path(__file__).resolve().parent / "languages.yaml"


class Language(Enum):
    TYPESCRIPT = "typescript"
    SWIFT = "swift"
    KOTLIN = "kotlin"
    RUST = "rust"


@dataclass
class LanguageConfig:
    language: Language
    address_type: str
    fallback: str
    types: dict[str, str] = field(default_factory=dict)
    aliases: list[str] = field(default_factory=list)
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    escape: str = "{name}_"
    keywords: frozenset[str] = frozenset()
    unescapable: frozenset[str] = frozenset()

    def identifier(self, name: str) -> str:
        """Make name usable as an identifier: no leading digit, keywords escaped."""
        if not name:
            name = "unnamed"
        if name[:1].isdigit():
            name = "_" + name
        if name in self.unescapable:
            return name + "_"
        if name in self.keywords:
            return self.escape.format(name=name)
        return name


@dataclass
class Config:
    package_version: str
    languages: dict[Language, LanguageConfig]


def load_config(path: Path = CONFIG_PATH) -> Config:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    languages = {}
    for name, entry in (data.get("languages") or {}).items():
        language = Language(name)
        languages[language] = LanguageConfig(
            language=language,
            address_type=entry["address_type"],
            fallback=entry["fallback"],
            types=dict(entry.get("types") or {}),
            aliases=[str(a) for a in entry.get("aliases") or []],
            dependencies=dict(entry.get("dependencies") or {}),
            dev_dependencies=dict(entry.get("dev_dependencies") or {}),
            escape=str(entry.get("escape", "{name}_")),
            keywords=frozenset(str(k) for k in entry.get("keywords") or []),
            unescapable=frozenset(str(k) for k in entry.get("unescapable") or []),
        )
    return Config(package_version=str(data.get("package_version", "0.1.0")), languages=languages)


_CONFIG: Optional[Config] = None


def get_config() -> Config:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG


def language_config(language: Language) -> LanguageConfig:
    return get_config().languages[language]


def parse_language(name: str) -> Language:
    """Resolve a language name or alias, case-insensitively."""
    key = name.strip().lower()
    for language, cfg in get_config().languages.items():
        if key == language.value or key in cfg.aliases:
            return language
    supported = ", ".join(l.value for l in get_config().languages)
    raise UnsupportedLanguageError(
        f"Unsupported language '{name}'. Available languages: {supported}",
        language=name,
    )


def parse_language_list(value: str) -> list[str]:
    """Split a comma-delimited language list, dropping blanks and repeats."""
    names: list[str] = []
    for item in value.split(","):
        item = item.strip()
        if item and item.lower() not in (n.lower() for n in names):
            names.append(item)
    return names
