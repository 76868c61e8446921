"""
sitewriter

Sitemap (sitemaps.org 0.9) XML writer with validated entries.
"""

from .config import WriterConfig, load_config
from .entry import ChangeFreq, UrlEntry, UrlEntryDraft
from .errors import (
    InvalidEntryError,
    InvalidUrlError,
    MissingRequiredFieldError,
    NaiveTimestampError,
    OutOfRangeError,
    SitemapEncodingError,
    SitemapError,
)
from .writer import (
    SITEMAP_NAMESPACE,
    Sitemap,
    SitemapWriter,
    render_sitemap,
    render_sitemap_bytes,
    write_sitemap,
)

__all__ = [
    "__version__",
    "ChangeFreq",
    "UrlEntry",
    "UrlEntryDraft",
    "Sitemap",
    "SitemapWriter",
    "SITEMAP_NAMESPACE",
    "WriterConfig",
    "load_config",
    "render_sitemap",
    "render_sitemap_bytes",
    "write_sitemap",
    "SitemapError",
    "InvalidEntryError",
    "InvalidUrlError",
    "MissingRequiredFieldError",
    "NaiveTimestampError",
    "OutOfRangeError",
    "SitemapEncodingError",
]

__version__ = "0.1.0"
