"""Application layer - services built on the domain."""
