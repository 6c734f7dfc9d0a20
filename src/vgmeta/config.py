"""Configuration for vgmeta."""

from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version

DEFAULT_BASE_URL = "https://vgmdb.net"


def _default_user_agent() -> str:
    try:
        return f"vgmeta/{version('vgmeta')}"
    except PackageNotFoundError:
        return "vgmeta"


@dataclass(frozen=True)
class APIConfig:
    """VGMdb site configuration.

    Attributes:
        base_url: Site root that album and search paths are appended to.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header sent with every request.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    user_agent: str = field(default_factory=_default_user_agent)
