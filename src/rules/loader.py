import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "POLICY_RULES_PATH"
DEFAULT_RULES_FILE = "rules.yaml"


def resolve_rules_path(base_dir: Path | None = None) -> Path:
    """Rules path from POLICY_RULES_PATH, else rules.yaml under base_dir."""
    override = os.environ.get(RULES_PATH_ENV)
    if override:
        return Path(override)
    return (base_dir or Path.cwd()) / DEFAULT_RULES_FILE


def _extract_yaml(content: str) -> str:
    """
    Return the first ```yaml fenced block, or the whole text if none.

    Lets the rules file double as a markdown document.
    """
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        stripped = line.strip()
        if stripped.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and stripped.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(_extract_yaml(path.read_text(encoding="utf-8")))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Rules file must contain a mapping, got {type(data).__name__}")

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded rules for site %r from %s", rules.site.name, path)
    return rules
