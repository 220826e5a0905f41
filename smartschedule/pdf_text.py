"""
Document -> raw text.

Accepted document handles:
- a local file path (.pdf, .html/.htm, anything else is read as UTF-8 text)
- an http(s) URL (downloaded, then handled by content type)
- "-" for standard input

The extractors only need a text blob, so this module is the single place
that knows about file formats.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Union

import pymupdf as fitz
import requests
from bs4 import BeautifulSoup

from smartschedule.model import TextResult

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30

DocumentHandle = Union[str, Path]


class TextUnavailable(Exception):
    """
    The document could not be turned into text (missing, unreadable, download failed).
    """


# ---------------------------------------------------------------------------
# Format readers
# ---------------------------------------------------------------------------


def pdf_bytes_to_text(pdf_bytes: bytes) -> str:
    """
    Extract page text from a PDF, pages separated by blank lines.
    """
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as exc:  # pymupdf raises several unrelated types here
        raise TextUnavailable(f"Not a readable PDF: {exc}") from exc

    try:
        parts = []
        for page in doc:
            t = (page.get_text("text") or "").strip()
            if not t:
                # some generators only expose text through blocks
                blocks = page.get_text("blocks") or []
                t = "\n".join([b[4] for b in blocks if len(b) > 4 and isinstance(b[4], str)]).strip()
            if t:
                parts.append(t)
        return "\n\n".join(parts)
    finally:
        doc.close()


def html_to_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return soup.get_text("\n", strip=True)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _read_url(url: str) -> str:
    try:
        resp = requests.get(url, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise TextUnavailable(f"Download failed: {exc}") from exc

    content_type = resp.headers.get("Content-Type", "").lower()
    path = url.split("?", 1)[0].lower()

    if "pdf" in content_type or path.endswith(".pdf"):
        return pdf_bytes_to_text(resp.content)
    if "html" in content_type or path.endswith((".html", ".htm")):
        return html_to_text(resp.text)
    return resp.text


def _read_file(path: Path) -> str:
    if not path.is_file():
        raise TextUnavailable(f"File not found: {path}")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise TextUnavailable(f"Cannot read {path}: {exc}") from exc

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return pdf_bytes_to_text(data)
    if suffix in (".html", ".htm"):
        return html_to_text(_decode(data))
    return _decode(data)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def read_document(handle: DocumentHandle) -> str:
    """
    Return the raw text of a document. Raises TextUnavailable.
    """
    if str(handle) == "-":
        return sys.stdin.read()

    handle_s = str(handle)
    if handle_s.startswith(("http://", "https://")):
        return _read_url(handle_s)
    return _read_file(Path(handle_s))


def extract_text(handle: DocumentHandle) -> TextResult:
    """
    Text source used by the pipeline: never raises for document problems,
    reports them as TextResult(success=False).
    """
    logger.debug("Extracting text from %s", handle)
    try:
        text = read_document(handle)
    except TextUnavailable as exc:
        logger.warning("Text extraction failed for %s: %s", handle, exc)
        return TextResult(success=False, error=str(exc))

    logger.debug("Extracted %d characters from %s", len(text), handle)
    return TextResult(success=True, text=text)
