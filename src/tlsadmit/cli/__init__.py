"""Command-line interface for tlsadmit."""
