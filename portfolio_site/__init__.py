"""
Portfolio Site - recent posts and projects highlights.

This package loads the site's content collections (markdown files with
YAML frontmatter), selects the most recent published blog posts for the
home page and the most recent projects for the CV page, and writes the
result as page data for the site's templates.

Main entry point is the CLI via `portfolio-site build` command.

Example:
    $ portfolio-site build -c src/content -o src/data
"""

__all__ = [
    "__version__",
    "ContentEntry",
    "CollectionLoader",
    "load_snapshot",
    "blog_highlights",
    "project_highlights",
    "select_highlights",
]
__version__ = "0.1.0"

from .core.selection import blog_highlights, project_highlights, select_highlights
from .core.types import ContentEntry
from .input.loader import CollectionLoader, load_snapshot
