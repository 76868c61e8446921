"""
Sitemap XML writer.

Turns an ordered sequence of `UrlEntry` values into a urlset document in
the sitemaps.org 0.9 namespace. Entries are written in input order and
are never modified. Each <url> contains <loc>, then <lastmod>,
<priority> and <changefreq> when those fields are set.
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import IO, Iterable, Iterator, List, Optional, Tuple, Union

from .config import WriterConfig
from .entry import UrlEntry
from .errors import InvalidEntryError, SitemapEncodingError
from .formatting import escape_text, format_changefreq, format_lastmod, format_priority
from .logger import get_logger

logger = get_logger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Per-file limits from the sitemaps.org protocol
MAX_URLS_PER_SITEMAP = 50_000
MAX_SITEMAP_BYTES = 50 * 1024 * 1024


class SitemapWriter:
    def __init__(self, config: Optional[WriterConfig] = None) -> None:
        self.config = config or WriterConfig()

    @property
    def _newline(self) -> str:
        return "" if self.config.indent is None else self.config.newline

    def _pad(self, level: int) -> str:
        if self.config.indent is None:
            return ""
        return self.config.indent_char * (self.config.indent * level)

    def _element(self, tag: str, text: str, level: int) -> str:
        return f"{self._pad(level)}<{tag}>{escape_text(text)}</{tag}>{self._newline}"

    def render_header(self) -> str:
        nl = self._newline
        parts = [XML_DECLARATION + nl]
        if self.config.stylesheet:
            href = escape_text(self.config.stylesheet)
            parts.append(f'<?xml-stylesheet type="text/xsl" href="{href}"?>{nl}')
        parts.append(f'<urlset xmlns="{SITEMAP_NAMESPACE}">{nl}')
        return "".join(parts)

    def render_footer(self) -> str:
        return f"</urlset>{self._newline}"

    def render_entry(self, entry: UrlEntry) -> str:
        """Render one complete <url> block."""
        if not isinstance(entry, UrlEntry):
            raise InvalidEntryError(entry)

        nl = self._newline
        parts = [f"{self._pad(1)}<url>{nl}", self._element("loc", entry.loc, 2)]
        if entry.lastmod is not None:
            parts.append(self._element("lastmod", format_lastmod(entry.lastmod), 2))
        if entry.priority is not None:
            parts.append(self._element("priority", format_priority(entry.priority), 2))
        if entry.changefreq is not None:
            parts.append(self._element("changefreq", format_changefreq(entry.changefreq), 2))
        parts.append(f"{self._pad(1)}</url>{nl}")
        return "".join(parts)

    def iter_chunks(self, entries: Iterable[UrlEntry]) -> Iterator[str]:
        """Yield the header, one chunk per entry, then the footer."""
        yield self.render_header()
        for entry in entries:
            yield self.render_entry(entry)
        yield self.render_footer()

    def _render_document(self, entries: Iterable[UrlEntry]) -> Tuple[str, bytes]:
        chunks = list(self.iter_chunks(entries))
        text = "".join(chunks)
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise SitemapEncodingError(f"Sitemap is not encodable as UTF-8: {e}", cause=e) from e
        self._log_document(len(chunks) - 2, len(data))
        return text, data

    def render(self, entries: Iterable[UrlEntry]) -> str:
        """
        Render the whole document as a string.

        Nothing is returned unless every entry rendered successfully.
        """
        return self._render_document(entries)[0]

    def render_bytes(self, entries: Iterable[UrlEntry]) -> bytes:
        """Render the whole document as UTF-8 bytes."""
        return self._render_document(entries)[1]

    def write(self, entries: Iterable[UrlEntry], sink: Union[IO[bytes], IO[str]]) -> int:
        """
        Stream the document to `sink` and return the number of entries written.

        Text sinks (io.TextIOBase) get str chunks, anything else gets UTF-8
        bytes. Every <url> block is rendered completely before it is
        written. On failure `entries_written` on the raised
        SitemapEncodingError or InvalidEntryError tells how many complete
        blocks reached the sink; bytes already written are not rolled back.
        """
        text_mode = isinstance(sink, io.TextIOBase)
        written = 0
        size = 0

        def _emit(chunk: str) -> None:
            nonlocal size
            data = chunk if text_mode else chunk.encode("utf-8")
            try:
                sink.write(data)
            except (OSError, ValueError, TypeError) as e:
                raise SitemapEncodingError(
                    f"Output sink rejected sitemap data after {written} entries: {e}",
                    entries_written=written,
                    cause=e,
                ) from e
            size += len(chunk.encode("utf-8")) if text_mode else len(data)

        _emit(self.render_header())
        for entry in entries:
            try:
                chunk = self.render_entry(entry)
            except InvalidEntryError as e:
                raise InvalidEntryError(entry, entries_written=written) from e
            except SitemapEncodingError as e:
                raise SitemapEncodingError(str(e), entries_written=written, cause=e) from e
            _emit(chunk)
            written += 1
        _emit(self.render_footer())

        self._log_document(written, size)
        return written

    def _log_document(self, count: int, size: int) -> None:
        logger.debug(f"Rendered sitemap with {count} URLs ({size} bytes)")
        if count > MAX_URLS_PER_SITEMAP:
            logger.warning(
                f"Sitemap has {count} URLs; the protocol allows at most "
                f"{MAX_URLS_PER_SITEMAP} per file"
            )
        if size > MAX_SITEMAP_BYTES:
            logger.warning(
                f"Sitemap is {size} bytes; the protocol allows at most "
                f"{MAX_SITEMAP_BYTES} bytes uncompressed"
            )


@dataclass
class Sitemap:
    """An ordered list of entries to be written as one urlset document."""

    urls: List[UrlEntry] = field(default_factory=list)

    def add(self, entry: Union[UrlEntry, str], **fields) -> UrlEntry:
        """
        Append an entry and return it.

        A string is treated as a location and validated with
        `UrlEntry.parse`; `fields` are passed along to it.
        """
        if isinstance(entry, str):
            entry = UrlEntry.parse(entry, **fields)
        elif fields:
            raise TypeError("Extra fields are only accepted together with a location string")
        self.urls.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self.urls)

    def __iter__(self) -> Iterator[UrlEntry]:
        return iter(self.urls)

    def to_string(self, config: Optional[WriterConfig] = None) -> str:
        return SitemapWriter(config).render(self.urls)

    def to_bytes(self, config: Optional[WriterConfig] = None) -> bytes:
        return SitemapWriter(config).render_bytes(self.urls)

    def write(self, sink: Union[IO[bytes], IO[str]], config: Optional[WriterConfig] = None) -> int:
        return SitemapWriter(config).write(self.urls, sink)


def render_sitemap(entries: Iterable[UrlEntry], config: Optional[WriterConfig] = None) -> str:
    return SitemapWriter(config).render(entries)


def render_sitemap_bytes(entries: Iterable[UrlEntry], config: Optional[WriterConfig] = None) -> bytes:
    return SitemapWriter(config).render_bytes(entries)


def write_sitemap(
    entries: Iterable[UrlEntry],
    sink: Union[IO[bytes], IO[str]],
    config: Optional[WriterConfig] = None,
) -> int:
    return SitemapWriter(config).write(entries, sink)
