"""Shared pytest fixtures for typeis tests."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

import pytest

_ENV_KEYS = (
    "TYPEIS_NORMALIZE_CACHE_SIZE",
    "TYPEIS_MATCH_CACHE_SIZE",
    "TYPEIS_SPLIT_CACHE_SIZE",
    "TYPEIS_THREAD_SAFE",
    "TYPEIS_LOG_LEVEL",
)


@dataclass
class FakeRequest:
    headers: Mapping[str, str] = field(default_factory=dict)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: None):
    from typeis.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    # tests may leave invalid values behind; settings are rebuilt below
    for key in _ENV_KEYS:
        os.environ.pop(key, None)
    reset_all_singletons()


@pytest.fixture()
def classifier():
    from typeis.media.classifier import TypeClassifier

    return TypeClassifier()


@pytest.fixture()
def make_request():
    def _make(**headers: str) -> FakeRequest:
        return FakeRequest({k.replace("_", "-"): v for k, v in headers.items()})

    return _make
