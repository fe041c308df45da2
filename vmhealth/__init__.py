"""vmhealth package."""
