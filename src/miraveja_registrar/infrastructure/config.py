"""
Configuration management using Pydantic Settings
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from miraveja_registrar.application import (
    DEFAULT_COLLECTION_TYPE,
    DEFAULT_CONTAINER_MODULE,
    RegistrationGenerator,
)
from miraveja_registrar.domain import AnnotationKind, AnnotationKindRegistry


class RegistrarSettings(BaseSettings):
    """Generation settings, read from ``MIRAVEJA_REGISTRAR_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="MIRAVEJA_REGISTRAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    namespace: Optional[str] = Field(default=None, description="Package name written into the generated module")
    container_module: str = Field(
        default=DEFAULT_CONTAINER_MODULE,
        description="Module the generated code imports the service collection type from",
    )
    collection_type: str = Field(default=DEFAULT_COLLECTION_TYPE, description="Service collection type name")
    output_file: Optional[Path] = Field(default=None, description="Where the generated module is written")
    strict_manual_interfaces: bool = Field(
        default=False,
        description="Drop MANUAL interfaces the decorated class does not implement",
    )
    fail_on_configuration_error: bool = Field(
        default=True,
        description="Abort generation on unrecognized annotation kinds instead of skipping them",
    )
    recognized_kinds: Annotated[List[AnnotationKind], NoDecode] = Field(
        default_factory=lambda: list(AnnotationKind),
        description="Annotation kinds recognized during generation",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("recognized_kinds", mode="before")
    @classmethod
    def parse_recognized_kinds(cls, v):
        """Parse recognized kinds from a comma-separated string"""
        if isinstance(v, str):
            return [kind.strip() for kind in v.split(",") if kind.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def kind_registry(self) -> AnnotationKindRegistry:
        return AnnotationKindRegistry(self.recognized_kinds)


def build_generator(settings: RegistrarSettings) -> RegistrationGenerator:
    """Create a generator configured from settings."""
    return RegistrationGenerator(
        registry=settings.kind_registry(),
        namespace=settings.namespace,
        container_module=settings.container_module,
        collection_type=settings.collection_type,
        strict_manual_interfaces=settings.strict_manual_interfaces,
        fail_on_configuration_error=settings.fail_on_configuration_error,
    )


@lru_cache()
def get_settings() -> RegistrarSettings:
    """Get cached settings instance"""
    return RegistrarSettings()
