"""Inkwell: build a static blog from a directory of Markdown articles.

The pipeline reads raw records from a document store, validates their
front-matter into immutable documents, derives one route per publishable
document and renders every route into a page wrapped by the shared shell.
"""

from inkwell.content.collection import DocumentCollection
from inkwell.content.store import FilesystemDocumentStore, MemoryDocumentStore
from inkwell.content.validation import validate, validate_records
from inkwell.data_primitives import Document, RawRecord, RenderedPage, Route
from inkwell.orchestration.build import BuildReport, run_build
from inkwell.rendering.renderer import PageRenderer
from inkwell.routing.routes import derive_routes

__version__ = "0.1.0"

__all__ = [
    "BuildReport",
    "Document",
    "DocumentCollection",
    "FilesystemDocumentStore",
    "MemoryDocumentStore",
    "PageRenderer",
    "RawRecord",
    "RenderedPage",
    "Route",
    "derive_routes",
    "run_build",
    "validate",
    "validate_records",
]
