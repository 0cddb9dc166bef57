"""External collaborators: content storage and text extraction."""
