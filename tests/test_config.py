"""Tests for config file loading and merging."""

from __future__ import annotations

from pathlib import Path

import pytest

from scopefilter.config import (
    ScopeFilterConfig,
    find_config_file,
    load_config,
    merge_with_config,
    parse_config_data,
)
from scopefilter.errors import ConfigError, InvalidIncludesExcludesError
from scopefilter.resources import GroupVersionResource

_NAMESPACES_TOML = 'include-namespaces = ["web"]\nexclude-namespaces = ["web-tmp"]\n'


class TestFindConfigFile:
    """Config discovery from a start directory."""

    @pytest.mark.parametrize(
        ("filename", "content"),
        [
            ("scopefilter.toml", _NAMESPACES_TOML),
            (".scopefilter.toml", _NAMESPACES_TOML),
            ("pyproject.toml", "[tool.scopefilter]\n" + _NAMESPACES_TOML),
        ],
    )
    def test_finds_and_loads(self, tmp_path: Path, filename: str, content: str) -> None:
        config_file = tmp_path / filename
        config_file.write_text(content)
        found = find_config_file(tmp_path)
        assert found == config_file
        assert found is not None
        ie = load_config(found).namespace_filter()
        assert ie.get_includes() == ["web"]
        assert ie.get_excludes() == ["web-tmp"]

    def test_dot_file_takes_precedence(self, tmp_path: Path) -> None:
        (tmp_path / "scopefilter.toml").write_text('include-namespaces = ["plain"]\n')
        (tmp_path / "pyproject.toml").write_text('[tool.scopefilter]\ninclude-namespaces = ["py"]\n')
        dot_config = tmp_path / ".scopefilter.toml"
        dot_config.write_text('include-namespaces = ["dot"]\n')
        assert find_config_file(tmp_path) == dot_config

    @pytest.mark.parametrize(
        "content",
        ["[tool.ruff]\nline-length = 100\n", "[tool.scopefilter\n"],
    )
    def test_pyproject_without_usable_section_skipped(self, tmp_path: Path, content: str) -> None:
        (tmp_path / "pyproject.toml").write_text(content)
        assert find_config_file(tmp_path) is None

    def test_nearest_config_wins_when_walking_up(self, tmp_path: Path) -> None:
        (tmp_path / "scopefilter.toml").write_text('include-namespaces = ["outer"]\n')
        subdir = tmp_path / "team" / "deep"
        subdir.mkdir(parents=True)
        inner = tmp_path / "team" / "scopefilter.toml"
        inner.write_text('include-namespaces = ["inner"]\n')
        found = find_config_file(subdir)
        assert found == inner
        assert load_config(inner).include_namespaces == ["inner"]

    def test_none_when_missing(self, tmp_path: Path) -> None:
        assert find_config_file(tmp_path) is None


def test_load_config_filters_table(tmp_path: Path) -> None:
    config_file = tmp_path / "scopefilter.toml"
    config_file.write_text(
        "[filters]\n"
        'include-namespaces = ["web", "api"]\n'
        'exclude-namespaces = ["web-tmp"]\n'
        'include-resources = ["deploy", "*.apps"]\n'
    )
    config = load_config(config_file)
    assert config.include_namespaces == ["web", "api"]
    assert config.exclude_namespaces == ["web-tmp"]
    assert config.include_resources == ["deploy", "*.apps"]
    # Unset fields should be None (not set)
    assert config.exclude_resources is None


def test_load_config_pyproject_reads_only_tool_table(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text(
        '[project]\nname = "x"\n\n[tool.scopefilter]\nexclude-resources = ["secrets"]\n'
    )
    config = load_config(config_file)
    assert config == ScopeFilterConfig(exclude_resources=["secrets"])


def test_load_config_flat_snake_case(tmp_path: Path) -> None:
    config_file = tmp_path / "scopefilter.toml"
    config_file.write_text('include_namespaces = ["a"]\n')
    config = load_config(config_file)
    assert config.include_namespaces == ["a"]


def test_parse_config_ignores_unknown_keys() -> None:
    config = parse_config_data({"unknown": 1, "include-namespaces": ["a"]})
    assert config == ScopeFilterConfig(include_namespaces=["a"])


def test_parse_config_empty_list_is_set() -> None:
    config = parse_config_data({"exclude-namespaces": []})
    assert config.exclude_namespaces == []


def test_parse_config_rejects_non_list() -> None:
    with pytest.raises(ConfigError, match="include-namespaces must be a list of strings"):
        parse_config_data({"include-namespaces": "app"})


def test_parse_config_rejects_non_string_items() -> None:
    with pytest.raises(ConfigError, match="got item 3"):
        parse_config_data({"exclude-resources": ["pods", 3]})


def test_merge_explicit_wins() -> None:
    explicit = ScopeFilterConfig(include_namespaces=["cli"])
    config = ScopeFilterConfig(include_namespaces=["file"], exclude_namespaces=["tmp"])
    merged = merge_with_config(explicit, config)
    assert merged.include_namespaces == ["cli"]
    assert merged.exclude_namespaces == ["tmp"]
    assert merged.include_resources is None


def test_merge_explicit_empty_list_wins() -> None:
    explicit = ScopeFilterConfig(exclude_namespaces=[])
    config = ScopeFilterConfig(exclude_namespaces=["tmp"])
    merged = merge_with_config(explicit, config)
    assert merged.exclude_namespaces == []


def test_merge_no_config() -> None:
    explicit = ScopeFilterConfig(include_resources=["pods"])
    assert merge_with_config(explicit, None) is explicit


def test_merge_does_not_modify_inputs() -> None:
    explicit = ScopeFilterConfig()
    config = ScopeFilterConfig(include_resources=["pods"])
    merge_with_config(explicit, config)
    assert explicit.include_resources is None


class TestNamespaceFilter:
    """Building a validated namespace filter from config."""

    def test_builds_filter(self) -> None:
        config = ScopeFilterConfig(
            include_namespaces=["app-web", "app-api"], exclude_namespaces=["app-tmp"]
        )
        ie = config.namespace_filter()
        assert ie.should_include("app-web")
        assert ie.should_include("app-api")
        assert not ie.should_include("app-tmp")
        assert not ie.should_include("default")

    def test_wildcard_with_excludes(self) -> None:
        config = ScopeFilterConfig(include_namespaces=["*"], exclude_namespaces=["kube-system"])
        ie = config.namespace_filter()
        assert ie.should_include("default")
        assert not ie.should_include("kube-system")

    def test_namespace_globs_rejected(self) -> None:
        config = ScopeFilterConfig(include_namespaces=["app-*"], exclude_namespaces=["app-tmp"])
        with pytest.raises(InvalidIncludesExcludesError) as exc_info:
            config.namespace_filter()
        assert len(exc_info.value.violations) == 1
        assert exc_info.value.violations[0].startswith('invalid namespace "app-*": ')

    def test_unset_means_everything(self) -> None:
        assert ScopeFilterConfig().namespace_filter().include_everything()

    def test_invalid_names_rejected(self) -> None:
        config = ScopeFilterConfig(include_namespaces=["Bad_Name"])
        with pytest.raises(InvalidIncludesExcludesError) as exc_info:
            config.namespace_filter()
        assert exc_info.value.violations[0].startswith('invalid namespace "Bad_Name": ')

    def test_wildcard_in_excludes_rejected(self) -> None:
        config = ScopeFilterConfig(exclude_namespaces=["*"])
        with pytest.raises(InvalidIncludesExcludesError):
            config.namespace_filter()


class TestResourceFilter:
    """Building a validated, resolved resource filter from config."""

    class _Resolver:
        def resource_for(self, resource: GroupVersionResource) -> GroupVersionResource:
            if resource.resource == "deploy":
                return GroupVersionResource(group="apps", version="v1", resource="deployments")
            return resource

    def test_builds_resolved_filter(self) -> None:
        config = ScopeFilterConfig(include_resources=["deploy", "pods"], exclude_resources=["secrets"])
        ie = config.resource_filter(self._Resolver())
        assert ie.get_includes() == ["deployments.apps", "pods"]
        assert ie.get_excludes() == ["secrets"]

    def test_overlap_rejected(self) -> None:
        config = ScopeFilterConfig(include_resources=["pods"], exclude_resources=["pods"])
        with pytest.raises(InvalidIncludesExcludesError, match="pods"):
            config.resource_filter(self._Resolver())

    def test_glob_patterns_not_checked_as_names(self) -> None:
        config = ScopeFilterConfig(include_resources=["*.apps"])
        ie = config.resource_filter(self._Resolver())
        assert ie.should_include("deployments.apps")
