"""
Catalog package for the book catalog service.

This package contains the schemas, the in-memory repository, the paced
search stream and the route definitions that expose the five catalogue
operations (GetBook, ListBooks, FindBooksByCategory, SearchBooks and
CreateBook) over HTTP. The repository is the only shared mutable state;
everything else is a thin layer on top of it.
"""

from .router import router as catalog_router  # noqa: F401
