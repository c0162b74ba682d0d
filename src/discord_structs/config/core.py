import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://discord.com/api/v10"
DEFAULT_MESSAGES_ENDPOINT = "/channels/{channel_id}/messages"

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("discord_structs", {})
        http_cfg = cfg.get("http", {})

        token_env = str(cfg.get("token_env", "DISCORD_API_TOKEN"))
        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)

        self.API_BASE: str = str(
            http_cfg.get("api_base") or os.getenv("DISCORD_API_BASE", DEFAULT_API_BASE)
        ).rstrip("/")
        self.MESSAGES_ENDPOINT: str = str(
            http_cfg.get("messages_endpoint")
            or os.getenv("DISCORD_MESSAGES_ENDPOINT", DEFAULT_MESSAGES_ENDPOINT)
        )
        self.REQUEST_TIMEOUT: float = float(
            http_cfg.get("request_timeout", os.getenv("DISCORD_REQUEST_TIMEOUT", "10"))
        )
        self.JUMP_FLASH: bool = _as_bool(cfg.get("jump_flash", os.getenv("JUMP_FLASH", "true")))

        if self.REQUEST_TIMEOUT <= 0:
            raise ValueError("DISCORD_REQUEST_TIMEOUT must be positive")
        if "{channel_id}" not in self.MESSAGES_ENDPOINT:
            raise ValueError("DISCORD_MESSAGES_ENDPOINT must contain a {channel_id} placeholder")

        if not self.DISCORD_API_TOKEN:
            logger.debug("%s not set; REST network adapter will send unauthenticated requests.", token_env)
