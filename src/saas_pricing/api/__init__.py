"""API subpackage - FastAPI service around the pricing engine."""
