"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch):
    """Provide default settings for all tests."""
    monkeypatch.setenv("CSP_LOG_JSON", "false")
    monkeypatch.setenv("CSP_LOG_LEVEL", "debug")
    monkeypatch.delenv("CSP_POLICY_PRESET", raising=False)
    monkeypatch.delenv("CSP_PRESETS_FILE", raising=False)

    # Reset cached settings and presets
    import csp_header.config.loader as loader
    import csp_header.presets as presets
    loader._settings = None
    presets.reset_presets_cache()
    yield
    loader._settings = None
    presets.reset_presets_cache()


@pytest.fixture
def policy():
    """A policy with a couple of directives already set."""
    from csp_header import ContentSecurityPolicy

    return (
        ContentSecurityPolicy()
        .set_directive("default-src", ["'self'"])
        .set_directive("img-src", [])
    )
