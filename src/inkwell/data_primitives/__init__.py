"""Fundamental data primitives for the Inkwell pipeline.

- **RawRecord**: what a document store yields
- **Document**: a validated, immutable article
- **Route**: one public path per publishable document
- **RenderedPage**: the HTML produced for a route
"""

from inkwell.data_primitives.document import Document, RawRecord, RenderedPage, Route

__all__ = [
    "Document",
    "RawRecord",
    "RenderedPage",
    "Route",
]
