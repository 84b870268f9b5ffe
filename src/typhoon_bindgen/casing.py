"""Identifier casing. Every emitted identifier passes through one of these."""


def _segments(name: str) -> list[str]:
    return [part for part in name.split("_") if part]


def to_pascal_case(name: str) -> str:
    """mint_to -> MintTo"""
    return "".join(part[0].upper() + part[1:] for part in _segments(name))


def to_camel_case(name: str) -> str:
    """mint_to -> mintTo"""
    parts = _segments(name)
    if not parts:
        return ""
    head = parts[0][0].lower() + parts[0][1:]
    return head + "".join(part[0].upper() + part[1:] for part in parts[1:])
