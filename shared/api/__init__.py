"""HTTP-facing helpers shared by every app: envelope responses and the error taxonomy."""
