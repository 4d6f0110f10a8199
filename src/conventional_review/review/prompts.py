import logging
from importlib import resources
from pathlib import Path
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from conventional_review.errors import ConfigurationError
from conventional_review.models.diff import DiffFile


logger = logging.getLogger(__name__)

PLACEHOLDERS = ("{diff}", "{conventions}")


class PromptTemplate(BaseModel):
    """Review prompt with `{diff}` and `{conventions}` placeholders."""
    model_config = ConfigDict(frozen=True)

    name: str = "custom"
    template: str

    @field_validator("template")
    @classmethod
    def _has_placeholders(cls, value: str) -> str:
        missing = [p for p in PLACEHOLDERS if p not in value]
        if missing:
            raise ValueError(f"template is missing placeholders: {', '.join(missing)}")
        return value

    def render(self, diff: str, conventions: str = "") -> str:
        return self.template.format(diff=diff, conventions=conventions)


def load_prompt_template(path: str | Path | None = None) -> PromptTemplate:
    """Load a prompt template from YAML, falling back to the packaged default."""
    try:
        if path is None:
            text = resources.files(__package__).joinpath("templates/review.yaml").read_text(encoding="utf-8")
        else:
            text = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(text)
        template = PromptTemplate(**data)
    except (OSError, yaml.YAMLError, TypeError, ValidationError) as e:
        raise ConfigurationError(f"Invalid prompt template {path or 'review.yaml'}: {e}") from e

    logger.debug(f"Loaded prompt template '{template.name}'")
    return template


def render_diff(diff_file: DiffFile) -> str:
    """Flatten all chunks into "<line> <content>" lines."""
    return "\n".join(f"{change.line_number} {change.content}" for change in diff_file.changes)


def build_review_prompt(diff_file: DiffFile, conventions: str | None, template: PromptTemplate) -> str:
    """Build the complete prompt for one file."""
    return template.render(diff=render_diff(diff_file), conventions=conventions or "")
