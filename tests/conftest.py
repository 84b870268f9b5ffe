"""Shared pytest fixtures: sample IDLs and scratch workspaces."""

import json
import shutil

import pytest
from pathlib import Path

PROGRAM_ID = "Fg6PaFpoGXkYsidMpWTK6W2BeZ7FEfcYkg476zPFsLnS"


@pytest.fixture
def samples_dir():
    """Path to tests/idl/ containing sample IDL documents."""
    return Path(__file__).parent / "idl"


@pytest.fixture
def counter_idl(samples_dir):
    return samples_dir / "counter.json"


@pytest.fixture
def minimal_idl():
    """One zero-arg instruction with a single signer account."""
    return {
        "metadata": {"address": PROGRAM_ID},
        "instructions": [
            {
                "name": "initialize",
                "accounts": [{"name": "payer", "isMut": True, "isSigner": True}],
                "args": [],
            }
        ],
        "accounts": [],
    }


@pytest.fixture
def write_idl(tmp_path):
    """Write a dict as <idl_dir>/<name>.json and return the path."""
    idl_dir = tmp_path / "target" / "idl"

    def _write(name: str, data) -> Path:
        idl_dir.mkdir(parents=True, exist_ok=True)
        path = idl_dir / f"{name}.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write


@pytest.fixture
def workspace(tmp_path, counter_idl):
    """A Typhoon workspace with target/idl/counter.json."""
    (tmp_path / "typhoon.toml").write_text('[workspace]\nname = "demo"\n')
    idl_dir = tmp_path / "target" / "idl"
    idl_dir.mkdir(parents=True)
    shutil.copy(counter_idl, idl_dir / "counter.json")
    return tmp_path
