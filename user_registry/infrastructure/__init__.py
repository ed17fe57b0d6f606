"""Infrastructure Layer: storage implementations and cross-cutting concerns."""
