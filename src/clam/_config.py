"""Config types for config-driven alternatives.

The same dict shape loads from JSON or YAML. Construction path:
  dict → parse_alternatives_config() → AlternativesConfig
       → Registry.load_alternatives() → Alternatives

Relationship to runtime types:

| Config type          | Runtime type       |
|----------------------|--------------------|
| AlternativesConfig   | Alternatives       |
| AlternativeConfig    | Alternative        |
| MatcherSpec          | bound Matcher      |

Example::

    {
        "alternatives": [
            {"matcher": "posix_option", "args": {"allowed_options": "h"}, "tag": "help"},
            {
                "any_of": [
                    {"matcher": "posix_long_option", "args": {"option": "link"}},
                    {"matcher": "posix_long_option", "args": {"option": "-link"}},
                ],
                "tag": "link",
            },
        ],
        "on_no_match": "unknown",
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class MatcherSpec:
    """Reference to a registered matcher with its keyword arguments.

    ``args`` binds every parameter except the input. An allow-set left out
    of ``args`` (or given as null) is the wildcard.
    """

    name: str
    args: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class AlternativeConfig:
    """One alternative: matcher specs tried in order, reporting ``tag``."""

    matchers: tuple[MatcherSpec, ...]
    tag: str


@dataclass(frozen=True, slots=True)
class AlternativesConfig:
    """Configuration for Alternatives."""

    alternatives: tuple[AlternativeConfig, ...]
    on_no_match: str | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_alternatives_config(data: dict[str, Any]) -> AlternativesConfig:
    """Parse a dict into an AlternativesConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw = data.get("alternatives")
    if raw is None:
        msg = "missing required field 'alternatives'"
        raise ConfigParseError(msg)
    if not isinstance(raw, list):
        msg = f"'alternatives' must be a list, got {type(raw).__name__}"
        raise ConfigParseError(msg)

    alternatives = tuple(_parse_alternative(a) for a in raw)

    on_no_match = data.get("on_no_match")
    if on_no_match is not None and not isinstance(on_no_match, str):
        msg = f"'on_no_match' must be a string, got {type(on_no_match).__name__}"
        raise ConfigParseError(msg)

    return AlternativesConfig(alternatives=alternatives, on_no_match=on_no_match)


def _parse_alternative(data: dict[str, Any]) -> AlternativeConfig:
    """Parse an alternative dict.

    Enforces oneof: exactly one of 'matcher' or 'any_of'.
    """
    if not isinstance(data, dict):
        msg = f"alternative must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "tag" not in data:
        msg = "alternative missing required field 'tag'"
        raise ConfigParseError(msg)
    tag = data["tag"]
    if not isinstance(tag, str):
        msg = f"tag must be a string, got {type(tag).__name__}"
        raise ConfigParseError(msg)

    has_matcher = "matcher" in data
    has_any_of = "any_of" in data
    if has_matcher and has_any_of:
        msg = "exactly one of 'matcher' or 'any_of' must be set, got both"
        raise ConfigParseError(msg)
    if not has_matcher and not has_any_of:
        msg = "one of 'matcher' or 'any_of' is required"
        raise ConfigParseError(msg)

    if has_matcher:
        matchers = (_parse_matcher_spec(data),)
    else:
        raw = data["any_of"]
        if not isinstance(raw, list) or not raw:
            msg = "'any_of' must be a non-empty list"
            raise ConfigParseError(msg)
        matchers = tuple(_parse_matcher_spec(m) for m in raw)

    return AlternativeConfig(matchers=matchers, tag=tag)


def _parse_matcher_spec(data: dict[str, Any]) -> MatcherSpec:
    """Parse a {"matcher": name, "args": {...}} dict."""
    if not isinstance(data, dict):
        msg = f"matcher spec must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "matcher" not in data:
        msg = "matcher spec missing required field 'matcher'"
        raise ConfigParseError(msg)
    name = data["matcher"]
    if not isinstance(name, str):
        msg = f"matcher must be a string, got {type(name).__name__}"
        raise ConfigParseError(msg)

    args = data.get("args")
    if args is None:
        args = {}
    elif not isinstance(args, dict):
        msg = f"args must be a dict, got {type(args).__name__}"
        raise ConfigParseError(msg)

    return MatcherSpec(name=name, args=args)
