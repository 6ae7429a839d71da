"""
Markdown report builders.
Assembles the info, market and exchange-rate screens from model objects.

Builders are pure: the same input always yields the same text, and time only
enters through an explicit ``generated_at`` argument.
"""

from datetime import datetime
from typing import List, Mapping, Optional, Sequence

from ..config import TREND_HORIZONS
from ..models import CoinInfo, CoinLinks, ExchangeRate, MarketRow, PriceQuote, TrendValue
from .value_formatter import format_value, trend_indicator, format_timestamp

MISSING = "-"

MARKET_HEADER = "| | Name | Price | 1h | 24h | 7d | 14d | 30d |"
MARKET_SEPARATOR = "| --- | --- | --- | --- | --- | --- | --- | --- |"

RATE_HEADER = "| Currency | Value | Type |"
RATE_SEPARATOR = "| --- | --- | --- |"


def _cell(text: str) -> str:
    """Escape pipes so API text cannot split a table cell"""
    return str(text).replace("|", "\\|")


def _amount(value) -> str:
    if value is None:
        return MISSING
    return format_value(value)


def _trend(trend: Optional[TrendValue]) -> str:
    if trend is None:
        return MISSING
    marker, percent = trend_indicator(trend.percent)
    return f"{marker} {percent}"


def _timestamp_line(generated_at: Optional[datetime]) -> List[str]:
    if generated_at is None:
        return []
    return [f"🕔 {format_timestamp(generated_at)}"]


def _join(sections: List[List[str]]) -> str:
    """Join non-empty sections with a blank line between them"""
    blocks = ["\n".join(lines) for lines in sections if lines]
    return "\n\n".join(blocks) + "\n"


def build_links_markdown(links: CoinLinks) -> List[List[str]]:
    """
    Build the website, explorer, community and source code sections.

    Empty URLs are skipped; a heading is kept even when its group is empty.

    Args:
        links: Links published for the coin

    Returns:
        List of sections, each a list of markdown lines
    """
    website = ["## 🌏 Website"]
    # Only the first homepage, the rest are usually mirrors
    for url in links.homepage:
        if url:
            website.append(f"- [Homepage]({url})")
            break

    explorers = ["## 🔎 Explorers"]
    explorers.extend(f"- [Blockchain Site]({url})" for url in links.blockchain_site if url)

    community = ["## 🗣 Community"]
    community.extend(f"- [Official Forum]({url})" for url in links.official_forum_url if url)
    if links.twitter_screen_name:
        community.append(f"- [Twitter](https://twitter.com/{links.twitter_screen_name})")
    if links.facebook_username:
        community.append(f"- [Facebook](https://facebook.com/{links.facebook_username})")
    if links.subreddit_url:
        community.append(f"- [Subreddit]({links.subreddit_url})")

    source_code = ["## 🧑‍💻 Source Code"]
    source_code.extend(f"- [Github]({url})" for url in links.repos_github if url)
    source_code.extend(f"- [Bitbucket]({url})" for url in links.repos_bitbucket if url)

    return [website, explorers, community, source_code]


def build_asset_report(
    asset: CoinInfo,
    currency: str,
    quote: Optional[PriceQuote] = None,
    trends: Optional[Mapping[str, Optional[TrendValue]]] = None,
    generated_at: Optional[datetime] = None,
    include_description: bool = False
) -> str:
    """
    Build the markdown report for a single coin.

    Args:
        asset: Coin details
        currency: Target currency code (e.g. "usd")
        quote: Current price; defaults to the asset's price in currency
        trends: Trends by horizon; defaults to the asset's trends in currency
        generated_at: Time shown under the title, omitted when None
        include_description: Append the coin description

    Returns:
        Markdown document

    Raises:
        FormatError: If a numeric field is NaN or infinite
    """
    currency_key = currency.lower()
    currency_display = currency.upper()
    if quote is None:
        quote = asset.quote(currency_key)
    if trends is None:
        trends = asset.trends(currency_key)

    market_data = asset.market_data

    title = [f"# {asset.name} ({asset.symbol.upper()})"]
    title.extend(_timestamp_line(generated_at))

    price_line = f"- {currency_display} **{_amount(quote.amount if quote else None)}**"
    change_24h = trends.get("24h")
    if change_24h is not None:
        marker, percent = trend_indicator(change_24h.percent)
        price_line += f" {marker} *{percent}% in the last 24 hours*"
    current_price = [f"## Current Price - {currency_display}", price_line]

    rank = str(asset.market_cap_rank) if asset.market_cap_rank is not None else MISSING
    market_cap = [
        f"## Market Cap - Rank {rank}",
        f"- {currency_display} {_amount(market_data.market_cap.get(currency_key))}",
        f"- Circulating Supply: {_amount(market_data.circulating_supply)}",
    ]

    low = _amount(market_data.low_24h.get(currency_key))
    high = _amount(market_data.high_24h.get(currency_key))
    daily = [
        "## 24 Hour Update",
        f"- Trading Vol. {_amount(market_data.total_volume.get(currency_key))}",
    ]
    daily_table = [
        "| 24h Low | 24h High |",
        "| --- | --- |",
        f"| {low} | {high} |",
    ]

    sections = [title, current_price, market_cap, daily, daily_table]
    sections.extend(build_links_markdown(asset.links))

    if include_description and asset.description:
        sections.append(["## 📖 Description", asset.description])

    return _join(sections)


def build_market_table(rows: Sequence[MarketRow]) -> str:
    """
    Build the market table, one line per row in input order.

    Args:
        rows: Market rows

    Returns:
        Markdown table with the fixed 8-column header
    """
    lines = [MARKET_HEADER, MARKET_SEPARATOR]
    for row in rows:
        cells = [
            _cell(row.symbol.upper()),
            _cell(row.name.upper()),
            _amount(row.price.amount if row.price else None),
        ]
        cells.extend(_trend(row.trend(horizon)) for horizon in TREND_HORIZONS)
        lines.append("| " + " | ".join(cells) + " |")

    return "\n".join(lines) + "\n"


def build_market_report(
    rows: Sequence[MarketRow],
    currency: str,
    generated_at: Optional[datetime] = None
) -> str:
    """Market table with title, timestamp and currency heading"""
    title = ["# Market Data"]
    title.extend(_timestamp_line(generated_at))
    heading = [f"## Currency: {currency.upper()}"]
    return _join([title, heading]) + "\n" + build_market_table(rows)


def _selected_rates(
    rates: Mapping[str, ExchangeRate],
    currencies: Optional[Sequence[str]]
) -> List[ExchangeRate]:
    if not currencies:
        return list(rates.values())

    selected = []
    seen = set()
    for code in currencies:
        if code in seen or code not in rates:
            continue
        seen.add(code)
        selected.append(rates[code])
    return selected


def build_rate_table(
    rates: Mapping[str, ExchangeRate],
    currencies: Optional[Sequence[str]] = None
) -> str:
    """
    Build the exchange-rate table.

    Args:
        rates: Exchange rates keyed by currency code
        currencies: Codes to keep; empty or None keeps everything.
            Codes missing from rates are skipped.

    Returns:
        Markdown table, one row per selected currency
    """
    lines = [RATE_HEADER, RATE_SEPARATOR]
    for rate in _selected_rates(rates, currencies):
        lines.append(f"| {_cell(rate.name)} | {format_value(rate.value)} | {_cell(rate.type)} |")

    return "\n".join(lines) + "\n"


def build_exchange_rate_report(
    rates: Mapping[str, ExchangeRate],
    currencies: Optional[Sequence[str]] = None,
    generated_at: Optional[datetime] = None
) -> str:
    """Exchange-rate table for 1 BTC with title and timestamp"""
    title = ["# Exchange Rates"]
    title.extend(_timestamp_line(generated_at))
    heading = ["## 1 BTC"]
    return _join([title, heading]) + "\n" + build_rate_table(rates, currencies)
