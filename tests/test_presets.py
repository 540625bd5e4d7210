"""Tests for YAML policy presets."""

from __future__ import annotations

import pytest

from csp_header import ContentSecurityPolicy, InvalidArgumentError
from csp_header.presets import build_policy, load_presets, reset_presets_cache


class TestLoadPresets:
    def test_bundled_presets(self):
        presets = load_presets()
        assert {"strict", "balanced", "permissive"} <= set(presets)

    def test_cached(self):
        assert load_presets() is load_presets()

    def test_reset_cache(self):
        first = load_presets()
        reset_presets_cache()
        assert load_presets() is not first

    def test_missing_file(self, tmp_path):
        assert load_presets(tmp_path / "nope.yaml") == {}

    def test_custom_file(self, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("locked:\n  default-src: []\n")
        assert load_presets(path) == {"locked": {"default-src": []}}

    def test_presets_only_use_csp1_directives(self):
        for directives in load_presets().values():
            assert set(directives) <= ContentSecurityPolicy.valid_directive_names()


class TestBuildPolicy:
    def test_default_preset_is_balanced(self):
        policy = build_policy()
        assert policy.get_directives() == build_policy("balanced").get_directives()
        assert policy.get_directives()["script-src"] == "'self' 'unsafe-inline'"

    def test_strict(self):
        policy = build_policy("strict")
        directives = policy.get_directives()
        assert directives["default-src"] == "'self'"
        assert directives["object-src"] == "'none'"
        assert directives["frame-src"] == "'none'"

    def test_permissive_allows_eval(self):
        assert "'unsafe-eval'" in build_policy("permissive").get_field_value()

    def test_env_selects_preset(self, monkeypatch):
        monkeypatch.setenv("CSP_POLICY_PRESET", "strict")
        assert build_policy() == build_policy("strict")

    def test_returns_new_instance(self):
        assert build_policy("strict") is not build_policy("strict")

    def test_unknown_preset(self):
        with pytest.raises(InvalidArgumentError, match="nope"):
            build_policy("nope")

    def test_output_parses_back(self):
        policy = build_policy("strict")
        assert ContentSecurityPolicy.from_string(policy.to_string()) == policy

    def test_custom_presets_file(self, monkeypatch, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text(
            "reporting:\n"
            "  default-src: [\"'self'\"]\n"
            "  report-uri: []\n"
            "  img-src:\n"
        )
        monkeypatch.setenv("CSP_PRESETS_FILE", str(path))
        policy = build_policy("reporting")
        assert policy.to_string() == "Content-Security-Policy: default-src 'self'; img-src 'none';"

    def test_invalid_directive_in_preset(self, monkeypatch, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("broken:\n  frame-ancestors: [\"'none'\"]\n")
        monkeypatch.setenv("CSP_PRESETS_FILE", str(path))
        with pytest.raises(InvalidArgumentError):
            build_policy("broken")

    @pytest.mark.parametrize("body", ["listed:\n  - default-src\n", "listed: strict\n"])
    def test_preset_not_a_mapping(self, monkeypatch, tmp_path, body):
        path = tmp_path / "presets.yaml"
        path.write_text(body)
        monkeypatch.setenv("CSP_PRESETS_FILE", str(path))
        with pytest.raises(InvalidArgumentError, match="listed"):
            build_policy("listed")

    def test_null_source_in_preset(self, monkeypatch, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("nulls:\n  img-src: [null]\n")
        monkeypatch.setenv("CSP_PRESETS_FILE", str(path))
        with pytest.raises(InvalidArgumentError, match="must be strings"):
            build_policy("nulls")
