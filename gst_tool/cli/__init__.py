"""Command-line interface for gst-tool."""
