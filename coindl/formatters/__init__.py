"""
Report formatters.
"""

from .value_formatter import format_value, trend_indicator, format_timestamp
from .report_builder import (
    build_asset_report,
    build_market_table,
    build_market_report,
    build_rate_table,
    build_exchange_rate_report,
)

__all__ = [
    "format_value", "trend_indicator", "format_timestamp",
    "build_asset_report", "build_market_table", "build_market_report",
    "build_rate_table", "build_exchange_rate_report"
]
