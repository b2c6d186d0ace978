"""Configuration management using Pydantic settings."""

from pathlib import Path
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REFERENCE_TOKENS = [
    "do",
    "no",
    "nos",
    "da",
    "das",
    "ao",
    "aos",
    "pelo",
    "pela",
    "conforme",
    "previsto",
    "disposto",
    "trata",
    "refere",
]


class Settings(BaseSettings):
    """Extraction settings loaded from environment variables (``LC214_`` prefix)."""

    # Source documents
    articles_source_path: Path = Field(
        default=Path("LC 214-2025.docx"),
        description="Statute document segmented into articles",
    )
    annexes_source_path: Path = Field(
        default=Path("LC 214-2025 - ANEXOS.docx"),
        description="Annex document segmented into annexes (converted to HTML)",
    )

    # Output artifacts
    output_dir: Path = Field(
        default=Path("Dados"),
        description="Directory receiving the generated JSON files",
    )
    articles_output_name: str = Field(
        default="lc214-data.json",
        description="File name of the article bundle",
    )
    annexes_output_name: str = Field(
        default="lc214-anexos.json",
        description="File name of the annex collection",
    )

    # Bundle metadata
    document_title: str = Field(
        default="Lei Complementar nº 214, de 16 de janeiro de 2025",
        description="Fixed descriptive title stored in the article bundle",
    )
    preamble_max_chars: int = Field(
        default=1000,
        ge=0,
        description="Maximum length of the ementa (text preceding Art. 1º)",
    )

    # Article segmentation
    article_min_number: int = Field(
        default=1,
        ge=1,
        description="Lowest article number accepted as a real heading",
    )
    article_max_number: int = Field(
        default=600,
        ge=1,
        description="Highest article number accepted (guards against formatting noise)",
    )
    reference_tokens: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REFERENCE_TOKENS),
        description="Prepositions that mark an 'Art. N' match as a cross-reference",
    )
    reference_lookbehind_chars: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Characters inspected before a match when looking for a reference token",
    )
    include_article_structure: bool = Field(
        default=False,
        description="Add 'paragrafos' and 'incisos' lists to every serialized article",
    )

    model_config = SettingsConfigDict(
        env_prefix="LC214_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("reference_tokens")
    @classmethod
    def validate_reference_tokens(cls, v: list[str]) -> list[str]:
        """Normalize tokens to lowercase and reject an empty list."""
        tokens = [token.strip().lower() for token in v if token and token.strip()]
        if not tokens:
            raise ValueError("LC214_REFERENCE_TOKENS must contain at least one token.")
        return tokens

    @model_validator(mode="after")
    def validate_article_bounds(self) -> "Settings":
        if self.article_min_number > self.article_max_number:
            raise ValueError(
                f"article_min_number ({self.article_min_number}) must not exceed "
                f"article_max_number ({self.article_max_number})"
            )
        return self

    @property
    def articles_output_path(self) -> Path:
        return self.output_dir / self.articles_output_name

    @property
    def annexes_output_path(self) -> Path:
        return self.output_dir / self.annexes_output_name


# Singleton instance
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """
    Get extraction settings instance (singleton pattern).

    Returns:
        Settings instance (cached after first call)
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
