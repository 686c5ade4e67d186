"""Shared pytest fixtures."""

from __future__ import annotations

import itertools
import logging

import pytest

from pathid.logging import set_global_log_level
from tests.sample_paths import REFERENCE_PATHS


@pytest.fixture
def reference_paths():
    return list(REFERENCE_PATHS)


@pytest.fixture
def small_vectors():
    # Every vector over {0..4} up to length 4 (781 vectors)
    vectors = []
    for length in range(5):
        vectors.extend(itertools.product(range(5), repeat=length))
    return vectors


@pytest.fixture(autouse=True)
def _restore_log_level():
    yield
    set_global_log_level(logging.INFO)
