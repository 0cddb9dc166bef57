"""Infrastructure layer: persistence, content storage, extraction.

Implements the application-layer protocols.
"""
