"""Service-level endpoints: health probe and JSON error pages."""
