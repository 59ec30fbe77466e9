"""Shared test fixtures."""

from datetime import timedelta, timezone

import pytest

from jsonconv.container import JSONConfig
from jsonconv.convert import default_registry

CST = timezone(timedelta(hours=8))


@pytest.fixture
def utc_registry():
    return default_registry(timezone.utc)


@pytest.fixture
def cst_registry():
    return default_registry(CST)


@pytest.fixture
def config(utc_registry):
    return JSONConfig(converter=utc_registry)
