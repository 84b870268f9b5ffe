"""Language-neutral binding model. An IDL document lowers to this; templates render it."""

from dataclasses import dataclass, field
from typing import Optional

from typhoon_bindgen.casing import to_camel_case, to_pascal_case
from typhoon_bindgen.idl import Document, Field, Instruction
from typhoon_bindgen.languages import Language, LanguageConfig, language_config
from typhoon_bindgen.type_mapper import address_type, map_type


@dataclass
class Param:
    name: str
    type: str


@dataclass
class AccountKey:
    """Account reference in an instruction, in on-chain positional order."""
    name: str
    is_writable: bool
    is_signer: bool


@dataclass
class Method:
    name: str
    params: list[Param] = field(default_factory=list)
    keys: list[AccountKey] = field(default_factory=list)
    args_type: Optional[str] = None
    args_param: Optional[str] = None


@dataclass
class Record:
    name: str
    fields: list[Param] = field(default_factory=list)


@dataclass
class BindingModule:
    program_name: str
    client_name: str
    program_id: str
    methods: list[Method] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)
    args_records: list[Record] = field(default_factory=list)

    @property
    def type_names(self) -> list[str]:
        return [r.name for r in self.records] + [r.name for r in self.args_records]

    def to_dict(self) -> dict:
        return {
            "program": self.program_name,
            "client": self.client_name,
            "program_id": self.program_id,
            "methods": [
                {
                    "name": m.name,
                    "params": [{"name": p.name, "type": p.type} for p in m.params],
                    "keys": [
                        {"name": k.name, "writable": k.is_writable, "signer": k.is_signer}
                        for k in m.keys
                    ],
                }
                for m in self.methods
            ],
            "types": self.type_names,
        }


def args_type_name(instruction: Instruction) -> str:
    return to_pascal_case(instruction.name) + "Args"


def program_identifier(program_name: str) -> str:
    """Pascal form of a program stem, safe as the start of a type name."""
    name = to_pascal_case(program_name.replace("-", "_"))
    return "_" + name if name[:1].isdigit() else name


def _unique(name: str, taken: set[str], cfg: LanguageConfig) -> str:
    """Escaped name, suffixed with the first free number if already taken."""
    candidate = cfg.identifier(name)
    n = 2
    while candidate in taken:
        candidate = cfg.identifier(f"{name}{n}")
        n += 1
    taken.add(candidate)
    return candidate


def lower(document: Document, program_name: str, language: Language) -> BindingModule:
    """Produce the binding model for one program in one target language."""
    cfg = language_config(language)
    address = address_type(language)
    module = BindingModule(
        program_name=program_name,
        client_name=program_identifier(program_name) + "Client",
        program_id=document.address,
    )
    method_names: set[str] = set()
    for ix in document.instructions:
        method = Method(name=_unique(to_camel_case(ix.name), method_names, cfg))
        params: set[str] = set()
        for account in ix.accounts:
            name = _unique(to_camel_case(account.name), params, cfg)
            method.params.append(Param(name, address))
            method.keys.append(AccountKey(name, account.is_mut, account.is_signer))
        if ix.args:
            method.args_type = cfg.identifier(args_type_name(ix))
            method.args_param = _unique("ixArgs" if "args" in params else "args", params, cfg)
            method.params.append(Param(method.args_param, method.args_type))
            module.args_records.append(_record(method.args_type, ix.args, language, cfg))
        module.methods.append(method)
    for account_type in document.accounts:
        module.records.append(
            _record(cfg.identifier(to_pascal_case(account_type.name)), account_type.fields, language, cfg)
        )
    return module


def _record(name: str, fields: list[Field], language: Language, cfg: LanguageConfig) -> Record:
    taken: set[str] = set()
    return Record(
        name=name,
        fields=[
            Param(_unique(to_camel_case(f.name), taken, cfg), map_type(f.type, language))
            for f in fields
        ],
    )
