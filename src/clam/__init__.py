"""clam — Composable string matchers for command line parsing.

Each matcher tries to consume a prefix of an argument and returns how many
characters it matched; 0 means no match. Control flow stays with the caller.
All public names are exported from this module for flat imports:

    from clam import match_posix_option, match_posix_long_option, Alternatives
"""

__version__ = "0.1.0"

# Alternatives
from clam._alternatives import (
    MAX_ALTERNATIVES,
    Alternative,
    Alternatives,
    Hit,
    MatcherError,
    alternatives_from_matchers,
    first_match,
)

# Character matchers
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

# Config types, see clam._config for details
from clam._config import (
    AlternativeConfig,
    AlternativesConfig,
    ConfigParseError,
    MatcherSpec,
    parse_alternatives_config,
)

# POSIX matchers
from clam._posix import (
    match_posix_flags,
    match_posix_long_option,
    match_posix_option,
    match_posix_terminate_options,
)

# Registry, see clam._registry for details
from clam._registry import (
    MAX_PATTERN_LENGTH,
    MAX_REGEX_PATTERN_LENGTH,
    InvalidConfigError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    TooManyAlternativesError,
    UnknownMatcherError,
    core_registry,
    register_core_matchers,
)

# String matchers
from clam._string_matchers import (
    match_at_least_n_chars,
    match_chars,
    match_chars_to_end,
    match_pattern,
    match_signed_integer10,
    match_unsigned_integer10,
)
from clam._types import AllowSet, Matcher, MatchResult

# Windows matchers
from clam._windows import match_windows_long_switch, match_windows_switch

__all__ = [
    # Types
    "AllowSet",
    "Matcher",
    "MatchResult",
    # Character matchers
    "match_char",
    "match_end",
    "match_anychar",
    "match_numeric10_char",
    "match_numeric16_char",
    "match_uppercase_char",
    "match_lowercase_char",
    "match_alpha_char",
    "match_alphanumeric_char",
    # String matchers
    "match_at_least_n_chars",
    "match_chars",
    "match_chars_to_end",
    "match_unsigned_integer10",
    "match_signed_integer10",
    "match_pattern",
    # POSIX matchers
    "match_posix_option",
    "match_posix_flags",
    "match_posix_long_option",
    "match_posix_terminate_options",
    # Windows matchers
    "match_windows_switch",
    "match_windows_long_switch",
    # Alternatives
    "Alternative",
    "Alternatives",
    "Hit",
    "MatcherError",
    "alternatives_from_matchers",
    "first_match",
    "MAX_ALTERNATIVES",
    # Config types
    "MatcherSpec",
    "AlternativeConfig",
    "AlternativesConfig",
    "ConfigParseError",
    "parse_alternatives_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "register_core_matchers",
    "core_registry",
    "UnknownMatcherError",
    "InvalidConfigError",
    "TooManyAlternativesError",
    "PatternTooLongError",
    "MAX_PATTERN_LENGTH",
    "MAX_REGEX_PATTERN_LENGTH",
]
