"""Named CSP policies loaded from YAML."""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml

from csp_header.config.loader import get_settings
from csp_header.content_security_policy import ContentSecurityPolicy
from csp_header.exceptions import InvalidArgumentError

logger = structlog.get_logger()

# Cache loaded presets
_presets: dict | None = None


def load_presets(path: str | Path | None = None) -> dict:
    """Load policy presets from YAML, caching after first load."""
    global _presets
    if _presets is not None:
        return _presets
    presets_path = Path(path or get_settings().presets_file)
    if not presets_path.exists():
        logger.error("policy_presets_not_found", path=str(presets_path))
        _presets = {}
        return _presets
    with open(presets_path) as f:
        _presets = yaml.safe_load(f) or {}
    logger.debug("policy_presets_loaded", path=str(presets_path), presets=sorted(_presets))
    return _presets


def reset_presets_cache() -> None:
    """Reset the presets cache (for testing)."""
    global _presets
    _presets = None


def build_policy(name: str | None = None) -> ContentSecurityPolicy:
    """Build a new policy from a named preset (default: CSP_POLICY_PRESET)."""
    preset_name = name or get_settings().policy_preset
    presets = load_presets()
    if preset_name not in presets:
        raise InvalidArgumentError(f"Unknown policy preset {preset_name!r}")

    directives = presets[preset_name] or {}
    if not isinstance(directives, dict):
        raise InvalidArgumentError(f"Policy preset {preset_name!r} must map directive names to source lists")

    policy = ContentSecurityPolicy()
    for directive, sources in directives.items():
        policy.set_directive(directive, sources or [])
    return policy
