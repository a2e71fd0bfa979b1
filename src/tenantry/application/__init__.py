"""Application layer: use cases over the identity domain."""
