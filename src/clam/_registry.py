"""Matcher registry for config-driven alternatives.

The registry maps matcher names to factories that bind a matcher's
parameters from config:
- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (args: dict) → Matcher
- load_alternatives() walks the config and constructs runtime Alternatives

Example::

    registry = register_core_matchers(RegistryBuilder()).build()

    config = parse_alternatives_config(yaml.safe_load(text))
    alternatives = registry.load_alternatives(config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from clam._alternatives import (
    MAX_ALTERNATIVES,
    Alternative,
    Alternatives,
    MatcherError,
    first_match,
)
from clam._char_matchers import (
    match_alpha_char,
    match_alphanumeric_char,
    match_anychar,
    match_char,
    match_end,
    match_lowercase_char,
    match_numeric10_char,
    match_numeric16_char,
    match_uppercase_char,
)
from clam._posix import (
    match_posix_flags,
    match_posix_long_option,
    match_posix_option,
    match_posix_terminate_options,
)
from clam._string_matchers import (
    compile_pattern,
    match_at_least_n_chars,
    match_chars,
    match_chars_to_end,
    match_pattern,
    match_signed_integer10,
    match_unsigned_integer10,
)
from clam._windows import match_windows_long_switch, match_windows_switch

if TYPE_CHECKING:
    from collections.abc import Callable

    from clam._config import AlternativeConfig, AlternativesConfig, MatcherSpec
    from clam._types import Matcher, MatchResult

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_PATTERN_LENGTH = 8192
MAX_REGEX_PATTERN_LENGTH = 4096

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownMatcherError(MatcherError):
    """A matcher name was not found in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown matcher: {name!r} (registered: {registered})"
        else:
            msg = f"unknown matcher: {name!r} (no matchers are registered)"
        super().__init__(msg)


class InvalidConfigError(MatcherError):
    """Matcher arguments were malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyAlternativesError(MatcherError):
    """Config has too many alternatives (width-based limit)."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many alternatives: {count} exceeds maximum {max_}")


class PatternTooLongError(MatcherError):
    """A literal or pattern argument exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

type MatcherFactory = Callable[[dict[str, Any]], Matcher]


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register matcher factories by name, then call build() to produce an
    immutable Registry.
    """

    def __init__(self) -> None:
        self._matcher_factories: dict[str, MatcherFactory] = {}

    def matcher(self, name: str, factory: MatcherFactory) -> RegistryBuilder:
        """Register a matcher factory under ``name``."""
        self._matcher_factories[name] = factory
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        return Registry(
            _matcher_factories=MappingProxyType(dict(self._matcher_factories)),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of matcher factories.

    Constructed via RegistryBuilder. Use load_alternatives() to compile
    config into runtime Alternatives.
    """

    _matcher_factories: MappingProxyType[str, MatcherFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_alternatives(self, config: AlternativesConfig) -> Alternatives[str]:
        """Load Alternatives from configuration.

        Raises:
            UnknownMatcherError: matcher name not registered
            InvalidConfigError: matcher arguments malformed
            TooManyAlternativesError: too many alternatives
            PatternTooLongError: literal or pattern exceeds length limit
        """
        if len(config.alternatives) > MAX_ALTERNATIVES:
            raise TooManyAlternativesError(len(config.alternatives), MAX_ALTERNATIVES)

        alternatives = tuple(self._load_alternative(a) for a in config.alternatives)
        logger.debug(
            "loaded %d alternatives (on_no_match=%r)",
            len(alternatives),
            config.on_no_match,
        )
        return Alternatives(alternatives=alternatives, on_no_match=config.on_no_match)

    def load_matcher(self, spec: MatcherSpec) -> Matcher:
        """Bind a single matcher spec via its registered factory."""
        factory = self._matcher_factories.get(spec.name)
        if factory is None:
            raise UnknownMatcherError(spec.name, list(self._matcher_factories.keys()))

        try:
            return factory(spec.args)
        except MatcherError:
            raise
        except Exception as e:
            raise InvalidConfigError(f"{spec.name}: {e}") from e

    @property
    def matcher_count(self) -> int:
        """Number of registered matchers."""
        return len(self._matcher_factories)

    def contains_matcher(self, name: str) -> bool:
        """Check if a matcher name is registered."""
        return name in self._matcher_factories

    def matcher_names(self) -> list[str]:
        """Return all registered matcher names (sorted)."""
        return sorted(self._matcher_factories.keys())

    def _load_alternative(self, config: AlternativeConfig) -> Alternative[str]:
        matchers = [self.load_matcher(spec) for spec in config.matchers]
        if len(matchers) == 1:
            return Alternative(matchers[0], config.tag)
        return Alternative(partial(_any_of, tuple(matchers)), config.tag)


def _any_of(matchers: tuple[Matcher, ...], input: str, /) -> MatchResult:
    """Try ``matchers`` on ``input`` in order; the input is bound last."""
    return first_match(input, *matchers)


# ═══════════════════════════════════════════════════════════════════════════════
# Core matcher factories
# ═══════════════════════════════════════════════════════════════════════════════

# Argument kinds: how each bound parameter is validated.
_CHAR = "char"
_LITERAL = "literal"
_ALLOW_SET = "allow_set"
_COUNT = "count"
_PATTERN = "pattern"

_CORE_MATCHERS: dict[str, tuple[Callable[..., MatchResult], dict[str, str]]] = {
    # Character matchers
    "char": (match_char, {"c": _CHAR}),
    "end": (match_end, {}),
    "anychar": (match_anychar, {"chars": _ALLOW_SET}),
    "numeric10_char": (match_numeric10_char, {}),
    "numeric16_char": (match_numeric16_char, {}),
    "uppercase_char": (match_uppercase_char, {}),
    "lowercase_char": (match_lowercase_char, {}),
    "alpha_char": (match_alpha_char, {}),
    "alphanumeric_char": (match_alphanumeric_char, {}),
    # String matchers
    "at_least_n_chars": (match_at_least_n_chars, {"n": _COUNT, "chars": _LITERAL}),
    "chars": (match_chars, {"chars": _LITERAL}),
    "chars_to_end": (match_chars_to_end, {"chars": _LITERAL}),
    "unsigned_integer10": (match_unsigned_integer10, {}),
    "signed_integer10": (match_signed_integer10, {}),
    "pattern": (match_pattern, {"pattern": _PATTERN}),
    # POSIX matchers
    "posix_option": (match_posix_option, {"allowed_options": _ALLOW_SET}),
    "posix_flags": (match_posix_flags, {"allowed_options": _ALLOW_SET}),
    "posix_long_option": (match_posix_long_option, {"option": _LITERAL}),
    "posix_terminate_options": (match_posix_terminate_options, {}),
    # Windows matchers
    "windows_switch": (match_windows_switch, {"allowed_switches": _ALLOW_SET}),
    "windows_long_switch": (match_windows_long_switch, {"switch": _LITERAL}),
}


def register_core_matchers(builder: RegistryBuilder) -> RegistryBuilder:
    """Register every built-in matcher under its name without ``match_``."""
    for name, (fn, params) in _CORE_MATCHERS.items():
        builder.matcher(name, _core_factory(fn, params))
    return builder


def core_registry() -> Registry:
    """Build a registry holding only the built-in matchers."""
    return register_core_matchers(RegistryBuilder()).build()


def _core_factory(
    fn: Callable[..., MatchResult], params: dict[str, str]
) -> MatcherFactory:
    def factory(args: dict[str, Any]) -> Matcher:
        unknown = sorted(set(args) - set(params))
        if unknown:
            msg = f"unexpected arguments {unknown} (accepted: {sorted(params)})"
            raise ValueError(msg)
        kwargs = {name: _check_arg(name, kind, args.get(name)) for name, kind in params.items()}
        if not kwargs:
            return fn
        return partial(fn, **kwargs)

    return factory


def _check_arg(name: str, kind: str, value: Any) -> Any:
    """Validate one bound argument against its kind."""
    if kind == _ALLOW_SET:
        # Absent or null is the wildcard; "" is the empty set.
        if value is not None and not isinstance(value, str):
            msg = f"'{name}' must be a string or null, got {type(value).__name__}"
            raise ValueError(msg)
        return value

    if value is None:
        msg = f"missing required argument '{name}'"
        raise ValueError(msg)

    if kind == _COUNT:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            msg = f"'{name}' must be a non-negative integer, got {value!r}"
            raise ValueError(msg)
        return value

    if not isinstance(value, str):
        msg = f"'{name}' must be a string, got {type(value).__name__}"
        raise ValueError(msg)

    if kind == _CHAR:
        if len(value) != 1:
            msg = f"'{name}' must be a single character, got {value!r}"
            raise ValueError(msg)
    elif kind == _PATTERN:
        if len(value) > MAX_REGEX_PATTERN_LENGTH:
            raise PatternTooLongError(len(value), MAX_REGEX_PATTERN_LENGTH)
        try:
            compile_pattern(value)
        except MatcherError as e:
            raise InvalidConfigError(str(e)) from e
    elif len(value) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(len(value), MAX_PATTERN_LENGTH)
    return value
