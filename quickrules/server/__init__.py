"""HTTP surface for rebuilding and reading generated pages."""
