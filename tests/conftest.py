"""Pytest configuration: Hypothesis profiles for local and CI runs."""

from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    'dev',
    settings(deadline=None, max_examples=60, suppress_health_check=[HealthCheck.too_slow]),
)
settings.register_profile(
    'ci',
    settings(deadline=None, max_examples=120, suppress_health_check=[HealthCheck.too_slow]),
)

_profile = (
    'ci'
    if (os.getenv('CI') or os.getenv('GITHUB_ACTIONS'))
    else os.getenv('HYPOTHESIS_PROFILE', 'dev')
)
settings.load_profile(_profile)


def pytest_report_header(config: pytest.Config) -> str:
    del config
    return f"Hypothesis profile: '{_profile}'"


@pytest.fixture(autouse=True)
def _clear_solar_tools_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without SOLAR_TOOLS_* overrides from the caller's shell."""
    monkeypatch.delenv('SOLAR_TOOLS_LOG', raising=False)
    monkeypatch.delenv('SOLAR_TOOLS_ZONE', raising=False)
