"""QuoteCanvas style normalization and scene construction engine.

Submodules are imported directly (``quotecanvas.engine.scene`` …); the boundary
models import ``quotecanvas.engine.colors``, so this package stays import-free.
"""
