"""Type mapping from IDL primitive tags to target-language type names."""

from typhoon_bindgen.idl import normalize_tag
from typhoon_bindgen.languages import Language, language_config


def map_type(tag: str, language: Language) -> str:
    """Target type name for tag. Unrecognized tags map to the language's opaque type."""
    cfg = language_config(language)
    return cfg.types.get(normalize_tag(tag), cfg.fallback)


def address_type(language: Language) -> str:
    return language_config(language).address_type
