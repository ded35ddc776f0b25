"""Analysis libraries (pure calculation code, no I/O)."""
