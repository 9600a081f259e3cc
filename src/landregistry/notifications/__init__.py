"""In-app notifications addressed to registry accounts."""
