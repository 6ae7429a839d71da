# Configuration for coin-dl
from dataclasses import dataclass, field, replace

# CoinGecko public API
COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"
COINGECKO_API_KEY_HEADER = "x-cg-demo-api-key"

# Request timeout in seconds
REQUEST_TIMEOUT = 10

# Command defaults
DEFAULT_COIN = "bitcoin"
DEFAULT_COINS = "bitcoin"
DEFAULT_CURRENCY = "usd"

# Width passed to the markdown renderer
RENDER_WIDTH = 100

# Horizons shown in the market table, in column order
TREND_HORIZONS = ["1h", "24h", "7d", "14d", "30d"]

# Trend glyphs
POSITIVE_MARKER = "✅"
NEGATIVE_MARKER = "🔻"

# Logging, read when the CLI starts so a .env file can set them.
# Console logging is off unless a level is set
LOG_LEVEL_ENV = "COINDL_LOG_LEVEL"
LOG_FILE_ENV = "COINDL_LOG_FILE"


@dataclass
class SpinnerConfig:
    """Look and messages of the loading spinner"""
    frequency: float = 0.1  # seconds per frame
    style: str = "dots"
    suffix: str = " coindl"
    message: str = "sit back and hodl."
    stop_character: str = "✓"
    stop_color: str = "green"
    stop_fail_message: str = "let's try again, the gecko might be out."
    stop_fail_character: str = "✗"
    stop_fail_color: str = "red"

    def updated(self, suffix: str = "", stop_fail_message: str = "") -> "SpinnerConfig":
        """Return a copy with the non-empty overrides applied"""
        changes = {}
        if suffix:
            changes["suffix"] = suffix
        if stop_fail_message:
            changes["stop_fail_message"] = stop_fail_message
        return replace(self, **changes)


@dataclass
class RunConfig:
    """Settings shared by every command, passed explicitly to each one"""
    show_notifications: bool = True
    play_notification_beep: bool = True
    render_width: int = RENDER_WIDTH
    spinner: SpinnerConfig = field(default_factory=SpinnerConfig)
