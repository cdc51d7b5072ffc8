"""Book catalog service."""
