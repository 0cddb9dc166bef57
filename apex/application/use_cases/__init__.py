"""Application use cases (report and document services)."""
