"""Public shipment tracking: progress, timeline and tracking number checks."""
