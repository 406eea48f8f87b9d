"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from filings_dashboard.domain.entities import FundTypeFilter, Tab


class PaginationConfig(BaseModel):
    """Page sizing of the filings list."""

    page_size: int = Field(default=12, ge=1, le=500)


class DefaultsConfig(BaseModel):
    """Initial filter selection of a new session."""

    tab: Tab = Tab.ACTIVE
    fund_type: FundTypeFilter = FundTypeFilter.ALL


class ProviderConfig(BaseModel):
    """Which data provider backs the dashboard."""

    kind: Literal["mock", "file"] = "mock"
    path: Optional[str] = Field(
        default=None, description="YAML filings file for the file provider"
    )

    @model_validator(mode="after")
    def _require_path_for_file(self) -> "ProviderConfig":
        if self.kind == "file" and not self.path:
            raise ValueError("provider.path is required when provider.kind is 'file'")
        return self


class RetrySettings(BaseModel):
    """Retry policy at the provider boundary."""

    enabled: bool = True
    max_attempts: int = Field(default=3, ge=1, le=10)
    base_delay_seconds: float = Field(default=0.5, ge=0)
    max_delay_seconds: float = Field(default=10.0, ge=0)
    exponential_base: float = Field(default=2.0, ge=1)


class DashboardConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    verbose_audit: bool = False
