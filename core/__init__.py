"""Cross-cutting concerns."""
