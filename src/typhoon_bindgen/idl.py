"""IDL document model and loader. Raw JSON is defaulted once, here."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from typhoon_bindgen.errors import NoInputError, ParseError

DEFAULT_PROGRAM_ID = "11111111111111111111111111111111"
IDL_SUFFIX = ".json"

NUMERIC_TAGS = (
    "u8", "u16", "u32", "u64", "u128",
    "i8", "i16", "i32", "i64", "i128",
)
BOOL_TAG = "bool"
STRING_TAG = "string"
PUBLIC_KEY_TAG = "publicKey"
PRIMITIVE_TAGS = NUMERIC_TAGS + (BOOL_TAG, STRING_TAG, PUBLIC_KEY_TAG)

_TAG_ALIASES = {
    "String": STRING_TAG,
    "pubkey": PUBLIC_KEY_TAG,
    "Pubkey": PUBLIC_KEY_TAG,
}


def normalize_tag(raw: Any) -> str:
    """Canonical primitive tag, or the raw tag (as text) when unrecognized."""
    if isinstance(raw, str):
        return _TAG_ALIASES.get(raw, raw)
    if raw is None:
        return "unknown"
    return json.dumps(raw, sort_keys=True)


@dataclass
class AccountMeta:
    """One account reference of an instruction. Order is positional on-chain."""
    name: str
    is_mut: bool = False
    is_signer: bool = False


@dataclass
class Field:
    name: str
    type: str


@dataclass
class Instruction:
    name: str
    accounts: list[AccountMeta] = field(default_factory=list)
    args: list[Field] = field(default_factory=list)


@dataclass
class AccountType:
    name: str
    fields: list[Field] = field(default_factory=list)


@dataclass
class Document:
    name: str
    address: str = DEFAULT_PROGRAM_ID
    instructions: list[Instruction] = field(default_factory=list)
    accounts: list[AccountType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, name: str) -> "Document":
        metadata = _as_dict(data.get("metadata"))
        address = metadata.get("address") or data.get("address") or DEFAULT_PROGRAM_ID
        doc_name = metadata.get("name") or data.get("name") or name
        return cls(
            name=str(doc_name),
            address=str(address),
            instructions=[_instruction(i) for i in _as_list(data.get("instructions"))],
            accounts=[_account_type(a) for a in _as_list(data.get("accounts"))],
        )


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return [v for v in value if isinstance(v, dict)] if isinstance(value, list) else []


def _flag(entry: dict, *keys: str) -> bool:
    for key in keys:
        if key in entry:
            return bool(entry[key])
    return False


def _field(entry: dict) -> Field:
    return Field(name=str(entry.get("name") or "unknown"), type=normalize_tag(entry.get("type")))


def _instruction(entry: dict) -> Instruction:
    accounts = [
        AccountMeta(
            name=str(a.get("name") or "unknown"),
            is_mut=_flag(a, "isMut", "isWritable", "writable"),
            is_signer=_flag(a, "isSigner", "signer"),
        )
        for a in _as_list(entry.get("accounts"))
    ]
    return Instruction(
        name=str(entry.get("name") or "unknown"),
        accounts=accounts,
        args=[_field(a) for a in _as_list(entry.get("args"))],
    )


def _account_type(entry: dict) -> AccountType:
    type_info = _as_dict(entry.get("type"))
    return AccountType(
        name=str(entry.get("name") or "Unknown"),
        fields=[_field(f) for f in _as_list(type_info.get("fields"))],
    )


def load_idl(path: Path, name: Optional[str] = None) -> Document:
    """Read one IDL file. Raises ParseError if it is unreadable or not a JSON object."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}", path=str(path))
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"cannot read IDL file: {e}", path=str(path))
    if not isinstance(data, dict):
        raise ParseError("IDL document must be a JSON object", path=str(path))
    return Document.from_dict(data, name=name or path.stem)


def discover_idls(idl_dir: Path) -> list[Path]:
    """Sorted IDL files directly under idl_dir. Raises NoInputError if there are none."""
    idl_dir = Path(idl_dir)
    if not idl_dir.is_dir():
        raise NoInputError("No IDL files found. Run 'typhoon build --idl' first.", path=str(idl_dir))
    files = sorted(p for p in idl_dir.iterdir() if p.is_file() and p.suffix == IDL_SUFFIX)
    if not files:
        raise NoInputError(f"No IDL files found in {idl_dir}. Run 'typhoon build --idl' first.")
    return files
