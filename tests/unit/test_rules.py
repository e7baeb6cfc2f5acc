"""
Tests for rules loading and validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.rules.loader import RULES_PATH_ENV, load_rules, resolve_rules_path

PROJECT_ROOT = Path(__file__).parent.parent.parent

MINIMAL = """
site:
  name: Test
  url: https://example.com
"""


def write(tmp_path: Path, content: str, name: str = "rules.yaml") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadRules:
    def test_project_rules_file(self) -> None:
        rules = load_rules(PROJECT_ROOT / "rules.yaml")
        assert rules.display.timezone == "Asia/Seoul"
        assert rules.images.content_placeholder == "/placeholder-card.jpg"
        assert rules.viewport.root_margin == "50px"
        assert rules.viewport.threshold == 0.1

    def test_defaults_applied(self, tmp_path: Path) -> None:
        rules = load_rules(write(tmp_path, MINIMAL))
        assert rules.identity.id_length == 7
        assert rules.articles.mock_count == 10
        assert rules.display.locale == "ko-KR"

    def test_markdown_fenced(self, tmp_path: Path) -> None:
        content = "# Rules\n\nSome prose.\n\n```yaml" + MINIMAL + "```\n\nMore prose.\n"
        rules = load_rules(write(tmp_path, content, "rules.md"))
        assert rules.site.name == "Test"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write(tmp_path, "site: [unclosed"))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="mapping"):
            load_rules(write(tmp_path, "- a\n- b\n"))

    def test_missing_site(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write(tmp_path, "display:\n  locale: ko-KR\n"))

    @pytest.mark.parametrize(
        "extra",
        [
            "viewport:\n  threshold: 1.5\n",
            "viewport:\n  root_margin: fifty\n",
            "display:\n  locale: xx-XX\n",
            "identity:\n  id_length: 2\n",
        ],
    )
    def test_invalid_values(self, tmp_path: Path, extra: str) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write(tmp_path, MINIMAL + extra))


class TestDerivedConfig:
    def test_gate_options(self, tmp_path: Path) -> None:
        rules = load_rules(write(tmp_path, MINIMAL + "viewport:\n  root_margin: 100px 0px\n  threshold: 0.25\n"))
        options = rules.gate_options()
        assert options.root_margin == "100px 0px"
        assert options.threshold == 0.25

    def test_card_config(self, tmp_path: Path) -> None:
        content = MINIMAL + "images:\n  content_placeholder: /x.jpg\narticles:\n  summary_length: 40\n"
        config = load_rules(write(tmp_path, content)).card_config()
        assert config.images.content_placeholder == "/x.jpg"
        assert config.summary_length == 40
        assert config.dates.locale == "ko-KR"


class TestResolvePath:
    def test_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RULES_PATH_ENV, raising=False)
        assert resolve_rules_path(tmp_path) == tmp_path / "rules.yaml"

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, str(tmp_path / "custom.yaml"))
        assert resolve_rules_path() == tmp_path / "custom.yaml"
