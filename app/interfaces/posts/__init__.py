"""Posts HTTP interface: router, schemas and dependency wiring."""
