"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from mathlex.cli import build_parser, load_config, main, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[output]\nspans = true\n")
        result = load_config(cfg, tmp_path)
        assert result["output"] == {"spans": True}

    def test_auto_discover_mathlex_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "mathlex.toml"
        cfg.write_text("[output]\nspans = false\n")
        result = load_config(None, tmp_path)
        assert result["output"] == {"spans": False}


class TestConfigMerge:
    def test_config_spans_applied(self, tmp_path: Path) -> None:
        cfg = tmp_path / "mathlex.toml"
        cfg.write_text("[output]\nspans = true\n")
        src = tmp_path / "expr.txt"
        src.write_text("x")
        ns = build_parser().parse_args([str(src)])
        opts = resolve_options(ns)
        assert opts.spans is True
        assert opts.input_file == src

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "mathlex.toml"
        cfg.write_text("[output]\nspans = true\n")
        src = tmp_path / "expr.txt"
        src.write_text("x")
        ns = build_parser().parse_args([str(src), "--no-spans"])
        assert resolve_options(ns).spans is False

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text("[output]\nspans = true\n")
        ns = build_parser().parse_args(["-x", "1", "--config", str(cfg)])
        assert resolve_options(ns).spans is True

    def test_non_bool_value_ignored(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text('[output]\nspans = "yes"\n')
        ns = build_parser().parse_args(["-x", "1", "--config", str(cfg)])
        assert resolve_options(ns).spans is False

    def test_malformed_config_returns_2(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        cfg = tmp_path / "broken.toml"
        cfg.write_text("[output\n")
        assert main(["-x", "1", "--config", str(cfg)]) == 2
        assert "invalid config" in capsys.readouterr().err
