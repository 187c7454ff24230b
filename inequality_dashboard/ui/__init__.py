"""Dashboard presentation."""
