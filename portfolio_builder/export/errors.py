"""
Errors raised by the static site export pipeline.

Nothing in the pipeline catches these; callers decide how to report them.
"""


class SiteExportError(Exception):
    pass


class GenerationError(SiteExportError):
    """A synthesis step (HTML, CSS, JS or README) failed."""


class ArchiveError(SiteExportError):
    """The ZIP archive could not be built."""
