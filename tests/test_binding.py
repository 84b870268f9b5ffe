"""Tests for lowering an IDL document to the binding model."""

import pytest

from typhoon_bindgen.binding import AccountKey, lower
from typhoon_bindgen.idl import Document, load_idl
from typhoon_bindgen.languages import Language


def _two_account_doc():
    return Document.from_dict(
        {
            "instructions": [
                {
                    "name": "deposit",
                    "accounts": [
                        {"name": "payer", "isMut": True, "isSigner": True},
                        {"name": "vault", "isMut": True, "isSigner": False},
                    ],
                    "args": [],
                }
            ]
        },
        name="bank",
    )


@pytest.mark.parametrize("language", list(Language))
def test_keys_keep_account_order_and_flags(language):
    module = lower(_two_account_doc(), "bank", language)
    assert module.methods[0].keys == [
        AccountKey("payer", True, True),
        AccountKey("vault", True, False),
    ]


@pytest.mark.parametrize("language", list(Language))
def test_no_args_means_no_args_param(language):
    method = lower(_two_account_doc(), "bank", language).methods[0]
    assert [p.name for p in method.params] == ["payer", "vault"]
    assert method.args_type is None


def test_args_param_typed_as_args_record(counter_idl):
    module = lower(load_idl(counter_idl), "counter", Language.TYPESCRIPT)
    method = module.methods[1]
    assert method.name == "incrementBy"
    assert method.params[-1].name == "args"
    assert method.params[-1].type == "IncrementByArgs"
    assert [p.type for p in method.params].count("IncrementByArgs") == 1
    assert [r.name for r in module.args_records] == ["IncrementByArgs"]
    assert module.args_records[0].fields[0].type == "number"


def test_account_records_are_camel_cased_and_mapped(counter_idl):
    module = lower(load_idl(counter_idl), "counter", Language.RUST)
    record = module.records[0]
    assert record.name == "Counter"
    assert [(f.name, f.type) for f in record.fields] == [
        ("count", "u64"),
        ("authority", "Pubkey"),
        ("isFrozen", "bool"),
        ("label", "String"),
        ("history", "Vec<u8>"),
    ]


def test_client_name_and_program_id(counter_idl):
    module = lower(load_idl(counter_idl), "my_counter", Language.KOTLIN)
    assert module.client_name == "MyCounterClient"
    assert module.program_id == "Fg6PaFpoGXkYsidMpWTK6W2BeZ7FEfcYkg476zPFsLnS"
    assert module.to_dict()["types"] == ["Counter", "IncrementByArgs"]


def _single_ix_doc(accounts, args=()):
    return Document.from_dict(
        {
            "instructions": [
                {
                    "name": "set_args",
                    "accounts": [{"name": a, "isMut": False, "isSigner": False} for a in accounts],
                    "args": [{"name": "value", "type": "u8"} for _ in args],
                }
            ]
        },
        name="clash",
    )


@pytest.mark.parametrize("language", list(Language))
def test_account_named_args_keeps_params_unique(language):
    method = lower(_single_ix_doc(["args"], args=["value"]), "clash", language).methods[0]
    assert [p.name for p in method.params] == ["args", "ixArgs"]
    assert method.args_param == "ixArgs"
    assert method.keys[0].name == "args"


@pytest.mark.parametrize("language", list(Language))
def test_accounts_with_same_camel_case_get_suffixed(language):
    method = lower(_single_ix_doc(["system_program", "systemProgram"]), "clash", language).methods[0]
    assert [p.name for p in method.params] == ["systemProgram", "systemProgram2"]
    assert [k.name for k in method.keys] == ["systemProgram", "systemProgram2"]


@pytest.mark.parametrize("language,account,expected", [
    (Language.TYPESCRIPT, "default", "default_"),
    (Language.SWIFT, "in", "`in`"),
    (Language.KOTLIN, "in", "`in`"),
    (Language.RUST, "type", "r#type"),
    (Language.RUST, "self", "self_"),
])
def test_keyword_account_names_are_escaped(language, account, expected):
    method = lower(_single_ix_doc([account]), "clash", language).methods[0]
    assert method.params[0].name == expected
    assert method.keys[0].name == expected


def test_escaped_name_collision_suffixes_before_escaping():
    method = lower(_single_ix_doc(["type", "type"]), "clash", Language.RUST).methods[0]
    assert [p.name for p in method.params] == ["r#type", "type2"]


@pytest.mark.parametrize("language", list(Language))
def test_program_stem_with_leading_digit(language):
    module = lower(_two_account_doc(), "1inch", language)
    assert module.client_name == "_1inchClient"
