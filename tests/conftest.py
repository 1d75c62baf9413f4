"""Shared test fixtures for yamlbind."""

from __future__ import annotations

from pathlib import Path

import pytest

from yamlbind.factory import ConfigurationFactory
from yamlbind.models.config import StrictModel
from yamlbind.parser.loader import TrackedLoader
from yamlbind.settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class SmallObject(StrictModel):
    username: str
    age: int


class ExtendedObject(StrictModel):
    username: str
    age: int
    password: str


class AppConfig(StrictModel):
    text: str
    flag: bool
    number: int
    dbl: float


class BigConfig(StrictModel):
    text: str
    flag: bool
    number: int
    dbl: float
    small_object: SmallObject


class ClusterConfig(StrictModel):
    name: str
    members: list[SmallObject] = []
    labels: dict[str, int] = {}
    backup: SmallObject | None = None


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def loader(settings: Settings) -> TrackedLoader:
    return TrackedLoader(settings)


@pytest.fixture
def factory(settings: Settings) -> ConfigurationFactory:
    return ConfigurationFactory(settings)


APP_CONFIG_YAML = """\
text: Hello world
flag: true
number: 5636
dbl: 43.78
"""

BIG_CONFIG_YAML = """\
text: Hello world
flag: true
number: 5636
dbl: 43.78
small_object:
  username: ben
  age: 20
"""

CLUSTER_CONFIG_YAML = """\
name: primary
members:
  - username: ben
    age: 20
  - username: kevin
    age: 12
labels:
  zone: 3
"""
