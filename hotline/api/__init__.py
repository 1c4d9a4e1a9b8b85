"""HTTP routes exposing the directory to the browser page."""
