# src/conventional_review/config.py
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _input(name: str, *fallbacks: str) -> AliasChoices:
    """Accept an Actions input (INPUT_<NAME>, hyphens kept) or plain env names."""
    return AliasChoices(f"input_{name}", *fallbacks)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # Generation
    model: str = Field("gpt-4o", validation_alias=_input("model", "model"))
    openai_api_key: str = Field(validation_alias=_input("openai-api-key", "openai_api_key"))
    openai_base_url: str | None = Field(None, validation_alias=_input("openai-base-url", "openai_base_url"))

    # GitHub
    github_token: str = Field(validation_alias=_input("github-token", "github_token"))
    github_api_url: str = Field("https://api.github.com", validation_alias=AliasChoices("github_api_url"))
    github_event_path: str | None = Field(None, validation_alias=AliasChoices("github_event_path"))

    # Review
    exclude_paths: str = Field("", validation_alias=_input("exclude-paths", "exclude_paths"))
    conventions_file: str | None = Field(None, validation_alias=_input("conventions-file", "conventions_file"))
    prompt_template: str | None = Field(None, validation_alias=_input("prompt-template", "prompt_template"))
    max_files: int | None = Field(None, gt=0, validation_alias=_input("max-files", "max_files"))
    log_level: str = Field("INFO", validation_alias=_input("log-level", "log_level"))

    @field_validator(
        "openai_base_url", "github_event_path", "conventions_file", "prompt_template", "max_files",
        mode="before",
    )
    @classmethod
    def _blank_is_unset(cls, value):
        # Actions passes unset inputs as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def exclude_patterns(self) -> list[str]:
        return [pattern.strip() for pattern in self.exclude_paths.split(",") if pattern.strip()]
