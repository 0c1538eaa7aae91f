"""Command-line app for year progress wallpapers."""
