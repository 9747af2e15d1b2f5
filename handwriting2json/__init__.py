"""handwriting2json: batch handwriting recognition → sibling JSON files."""

__version__ = "0.1.0"
