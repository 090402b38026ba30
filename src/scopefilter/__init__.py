"""
Include/exclude filtering of string identifiers such as namespace names and
resource kinds, with glob patterns, validation of include/exclude lists, and
resolution of raw names to canonical ones.

Usage::

    from scopefilter import (
        generate_includes_excludes,
        validate_namespace_includes_excludes,
    )

    errors = validate_namespace_includes_excludes(["app-web", "app-api"], ["app-tmp"])
    namespaces = generate_includes_excludes(["app-web", "app-api"], ["app-tmp"], lambda ns: ns)
    namespaces.should_include("app-web")  # True
    namespaces.should_include("default")  # False
"""

from scopefilter.config import ScopeFilterConfig, find_config_file, load_config, merge_with_config
from scopefilter.errors import (
    ConfigError,
    GlobSyntaxError,
    InvalidIncludesExcludesError,
    ResourceNotFoundError,
    ScopeFilterError,
)
from scopefilter.generate import generate_includes_excludes, get_resource_includes_excludes
from scopefilter.globs import compile_glob
from scopefilter.includes_excludes import WILDCARD, IncludesExcludes, IncludesExcludesBuilder
from scopefilter.pattern_set import PatternSet
from scopefilter.resources import GroupResource, GroupVersionResource, ResourceResolver
from scopefilter.validation import (
    check_includes_excludes,
    validate_includes_excludes,
    validate_namespace_includes_excludes,
    validate_namespace_name,
)

__all__ = [
    "WILDCARD",
    "ConfigError",
    "GlobSyntaxError",
    "GroupResource",
    "GroupVersionResource",
    "IncludesExcludes",
    "IncludesExcludesBuilder",
    "InvalidIncludesExcludesError",
    "PatternSet",
    "ResourceNotFoundError",
    "ResourceResolver",
    "ScopeFilterConfig",
    "ScopeFilterError",
    "check_includes_excludes",
    "compile_glob",
    "find_config_file",
    "generate_includes_excludes",
    "get_resource_includes_excludes",
    "load_config",
    "merge_with_config",
    "validate_includes_excludes",
    "validate_namespace_includes_excludes",
    "validate_namespace_name",
]
