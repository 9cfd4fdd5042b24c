"""CSS source reading: local files, stdin, URLs and the Google Fonts CSS API."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from .config import Config
from .errors import FetchError
from .fontface import analyze
from .report import FamilySummary, summarize

log = logging.getLogger(__name__)


def _download(url: str, config: Config) -> str:
    """Download url as text with retries."""
    fetch = config.fetch
    log.info("Fetching %s", url)
    req = Request(url, headers={"User-Agent": fetch.user_agent})
    attempts = max(fetch.retries, 1)
    for attempt in range(1, attempts + 1):
        try:
            with urlopen(req, timeout=fetch.timeout) as resp:
                charset = resp.headers.get_content_charset() or "utf-8"
                data = resp.read()
            log.debug("Fetched %s (%d bytes)", url, len(data))
            break
        except (HTTPError, URLError, OSError) as exc:
            if attempt == attempts:
                raise FetchError(f"Failed to fetch {url} after {attempts} attempts") from exc
            log.warning("Attempt %d/%d failed for %s: %s", attempt, attempts, url, exc)
            time.sleep(fetch.retry_delay * attempt)

    try:
        return data.decode(charset)
    except (UnicodeDecodeError, LookupError) as exc:
        raise FetchError(f"Cannot decode {url} as {charset}: {exc}") from exc


def read_source(source: str | Path, config: Config) -> str:
    """Read CSS from a file path, a URL, or '-' for stdin."""
    source_str = str(source)
    if source_str == "-":
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as exc:
            raise FetchError(f"Cannot read stdin: {exc}") from exc
    if source_str.startswith("http://") or source_str.startswith("https://"):
        return _download(source_str, config)
    try:
        return Path(source_str).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FetchError(f"Cannot read {source_str}: {exc}") from exc


def google_fonts_url(family: str, config: Config) -> str:
    query = urlencode({"family": family, "display": config.google.display})
    return f"{config.google.css_url}?{query}"


def fetch_google_font_css(family: str, config: Config) -> str:
    """Download the @font-face CSS Google Fonts serves for a family."""
    return _download(google_fonts_url(family, config), config)


def analyze_google_font(family: str, config: Config) -> FamilySummary:
    """Fetch a Google Fonts family and summarize its unicode-range chunks.

    The summary is for the first family declared in the returned CSS.
    """
    stats = analyze(fetch_google_font_css(family, config))
    summaries = summarize(stats)
    if not summaries:
        raise FetchError(f"No @font-face rules found for {family!r}")
    summary = summaries[0]
    log.info(
        "%s: %d chunks, %d codepoints", summary.family, summary.chunk_count, summary.total,
    )
    return summary
