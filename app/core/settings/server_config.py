"""HTTP server configuration."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """Bind address and browser origins allowed by CORS."""

    host: str
    port: int
    cors_origins: str

    @property
    def cors_origins_list(self) -> list[str]:
        """Allowed origins as a list (empty entries dropped)."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
