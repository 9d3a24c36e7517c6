"""Infrastructure adapters (I/O) implementing domain ports."""
