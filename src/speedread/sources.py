#!/usr/bin/env python3
"""Input sources for speedread.

Text can come from:
- A local file path
- An http(s) URL (fetched with httpx, readable text extracted with
  BeautifulSoup)
- Piped standard input
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

import httpx
from bs4 import BeautifulSoup

from .models import TOOL_VERSION


FETCH_TIMEOUT = httpx.Timeout(30.0, connect=10.0)
USER_AGENT = f"speedread/{TOOL_VERSION}"

# elements that never hold article text
NOISE_TAGS = ["script", "style", "noscript", "nav", "header", "footer", "aside", "form", "svg", "iframe"]


class SourceError(RuntimeError):
    """Raised when input text cannot be obtained."""


def is_url(source: Optional[str]) -> bool:
    return bool(source) and (source.startswith("http://") or source.startswith("https://"))


# ============================================================
# HTML
# ============================================================

def extract_readable_text(html: str) -> str:
    """Extract the main readable text from an HTML document.

    Boilerplate elements are dropped; the first <article>, else <main>,
    else <body> is used as the content root.

    Args:
        html: Raw HTML

    Returns:
        Plain text with block elements separated by newlines
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(NOISE_TAGS):
        tag.decompose()

    root = soup.find("article") or soup.find("main") or soup.body or soup
    return root.get_text(separator="\n", strip=True)


def fetch_url(url: str, client: Optional[httpx.Client] = None) -> str:
    """Fetch a web page and return its readable text.

    Args:
        url: http(s) URL
        client: Optional httpx client (a temporary one is used otherwise)

    Returns:
        Extracted plain text

    Raises:
        SourceError: On network errors, non-200 responses or empty content
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client(
            follow_redirects=True,
            timeout=FETCH_TIMEOUT,
            headers={"User-Agent": USER_AGENT},
        )
    try:
        try:
            resp = client.get(url)
        except httpx.HTTPError as e:
            raise SourceError(f"failed to fetch URL: {e}") from e
        if resp.status_code != httpx.codes.OK:
            raise SourceError(f"HTTP error: {resp.status_code} {resp.reason_phrase}")
        text = extract_readable_text(resp.text)
    finally:
        if owns_client:
            client.close()

    if not text.strip():
        raise SourceError("failed to extract content: page has no readable text")
    return text


# ============================================================
# Files / stdin
# ============================================================

def read_input(source: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """Read the text to be displayed.

    Args:
        source: File path or URL; None or "" reads piped stdin
        stdin: Stream used instead of sys.stdin

    Returns:
        Raw text

    Raises:
        SourceError: If the input cannot be read
    """
    if is_url(source):
        return fetch_url(source)

    if source:
        try:
            return Path(source).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise SourceError(f"failed to open file: {e}") from e

    stream = stdin if stdin is not None else sys.stdin
    if stream is None or stream.isatty():
        raise SourceError("no input: provide a filename, URL, or pipe text to stdin")
    # decode the raw bytes leniently, like file input
    buffer = getattr(stream, "buffer", None)
    try:
        if buffer is not None:
            return buffer.read().decode("utf-8", errors="replace")
        return stream.read()
    except OSError as e:
        raise SourceError(f"failed to read input: {e}") from e
