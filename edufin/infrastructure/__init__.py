"""Infrastructure layer: backend gateway and draft storage."""
