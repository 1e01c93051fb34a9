"""Argument models shared across the catalog."""

from pydantic import ConfigDict

from velocity_mcp.domain.models import CamelModel


class OpenInput(CamelModel):
    """Service input object; fields beyond the declared ones pass through."""

    model_config = ConfigDict(extra="allow")


class NoArgs(CamelModel):
    pass


class TenantArgs(CamelModel):
    """Optional tenant; the configured tenant is used when omitted."""

    tenant_id: str | None = None
