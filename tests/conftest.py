from __future__ import annotations

import os

import pytest

from pwshort.config import Settings
from pwshort.registry import CommandRegistry

REGISTRY_DEFINITIONS = {
    "common_parameters": {"ErrorAction": ["ea"], "Verbose": ["vb"]},
    "commands": [
        {
            "name": "Get-ChildItem",
            "aliases": ["gci", "ls", "dir"],
            "parameters": {
                "Path": [],
                "LiteralPath": ["PSPath", "LP"],
                "Recurse": ["s"],
                "Filter": [],
                "Force": [],
            },
        },
        {"name": "Where-Object", "aliases": ["?", "where"], "parameters": {"FilterScript": []}},
        {"name": "Sort-Object", "aliases": ["sort"], "parameters": {"Property": [], "Descending": []}},
        {"name": "Get-Date", "parameters": {"Format": []}},
        {"name": "Write-Host", "parameters": {"Object": [], "NoNewline": []}},
        {"name": "Test-Tie", "aliases": ["ab", "cd", "xyz"], "parameters": {"Mode": ["mx", "my"]}},
    ],
}


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("PWSHORT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry.from_mapping(REGISTRY_DEFINITIONS)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, line_ending="lf")
