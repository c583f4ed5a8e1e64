"""Configuration for the S3 document loader."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REGION = "us-east-1"


class S3LoaderConfig(BaseSettings):
    """Configuration for the S3 storage client.

    All settings can be configured via environment variables with S3_LOADER_ prefix.

    Region resolution:
        - S3_LOADER_AWS_REGION, then AWS_REGION, when set and non-empty
        - "us-east-1" otherwise

    Credentials are resolved by the default boto3 chain (env vars, shared
    credentials file, instance profile). S3_LOADER_AWS_PROFILE selects a
    named profile.

    S3-compatible services (MinIO, LocalStack) are reached by setting
    S3_LOADER_ENDPOINT_URL or AWS_ENDPOINT_URL_S3.
    """

    model_config = SettingsConfigDict(
        env_prefix="S3_LOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    aws_region: str = Field(
        default=DEFAULT_REGION,
        validation_alias=AliasChoices("S3_LOADER_AWS_REGION", "AWS_REGION"),
        description="AWS region for the S3 client",
    )
    aws_profile: str | None = Field(
        default=None,
        description="AWS profile name (uses default credential chain if not set)",
    )
    endpoint_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("S3_LOADER_ENDPOINT_URL", "AWS_ENDPOINT_URL_S3"),
        description="Custom endpoint for S3-compatible storage",
    )

    # Deadlines applied to every request made by the client
    connect_timeout: float = Field(default=10.0, ge=1.0, le=120.0)
    read_timeout: float = Field(
        default=60.0,
        ge=1.0,
        le=900.0,
        description="Socket read timeout for get-object and body reads (seconds)",
    )

    log_level: str = Field(default="INFO")

    @field_validator("aws_region", mode="before")
    @classmethod
    def default_empty_region(cls, v: str | None) -> str:
        """Fall back to the default region when the value is empty."""
        if v is None or not str(v).strip():
            return DEFAULT_REGION
        return str(v).strip()

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint_url(cls, v: str | None) -> str | None:
        """Validate URL format and strip trailing slash."""
        if not v:
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()
