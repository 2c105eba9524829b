"""Adaptadores de I/O: HTTP, encoding de query y servicios de recursos."""
