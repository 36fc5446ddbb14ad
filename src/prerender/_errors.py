"""Prerender error hierarchy.

All prerender-specific errors inherit from PrerenderError for easy catching.
"""


class PrerenderError(Exception):
    """Base error for all prerender operations."""


class ConfigError(PrerenderError):
    """Invalid or missing configuration, entry artifact, or render export."""


class RenderError(PrerenderError):
    """A render function reported a failure for a request path."""


class ExtractionError(PrerenderError):
    """Rendered output could not be parsed for links."""


class StorageError(PrerenderError):
    """A generated asset could not be written to the asset store."""


class ExportError(PrerenderError):
    """Error while writing generated assets to the output directory."""
