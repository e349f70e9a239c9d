"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class VocabularySettings(BaseSettings):
    """Vocabulary source and scheduling defaults"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    dir: Path = Field(default=Path("vocab"), validation_alias=AliasChoices("VOCABPOP_DIR"))
    interval_minutes: int = Field(
        default=1, validation_alias=AliasChoices("VOCABPOP_INTERVAL")
    )
    shuffle: bool = Field(default=False, validation_alias=AliasChoices("VOCABPOP_SHUFFLE"))
    comment_prefix: str | None = Field(
        default=None, validation_alias=AliasChoices("VOCABPOP_COMMENT_PREFIX")
    )

    @field_validator("interval_minutes")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        """Validate notification interval"""
        if v <= 0:
            raise ValueError("Interval must be a positive number of minutes")
        return v

    @field_validator("comment_prefix")
    @classmethod
    def validate_comment_prefix(cls, v: str | None) -> str | None:
        """Treat an empty prefix as disabled"""
        return v or None


class NotifierSettings(BaseSettings):
    """Desktop notification settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    app_name: str = Field(
        default="VocabPop", validation_alias=AliasChoices("VOCABPOP_APP_NAME")
    )
    timeout: int = Field(
        default=10, validation_alias=AliasChoices("VOCABPOP_NOTIFY_TIMEOUT")
    )
    console_only: bool = Field(
        default=False, validation_alias=AliasChoices("VOCABPOP_CONSOLE_ONLY")
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Notification timeout must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        validation_alias=AliasChoices("LOG_FORMAT"),
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    vocabulary: VocabularySettings = Field(default_factory=VocabularySettings)
    notifier: NotifierSettings = Field(default_factory=NotifierSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class RunConfig(BaseModel):
    """Resolved configuration for a single run, built once from CLI input"""

    model_config = ConfigDict(frozen=True)

    dir: Path = Field(default=Path("vocab"), description="Vocabulary directory")
    interval_minutes: int = Field(default=1, description="Minutes between notifications")
    force: bool = Field(default=False, description="Show one notification and exit")
    shuffle: bool = Field(default=False, description="Shuffle entries once at startup")
    console_only: bool = Field(default=False, description="Skip native notifications")
    comment_prefix: str | None = Field(
        default=None, description="Prefix marking comment lines in vocabulary files"
    )

    @field_validator("interval_minutes")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        """Validate notification interval"""
        if v <= 0:
            raise ValueError("Interval must be a positive number of minutes")
        return v

    @property
    def interval_seconds(self) -> float:
        return self.interval_minutes * 60.0


# Global settings instance
settings = AppSettings()
