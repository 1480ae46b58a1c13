"""Infrastructure: catalog repository and headless checkout environment."""
