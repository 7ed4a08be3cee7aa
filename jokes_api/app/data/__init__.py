"""Static data bundled with the application."""
