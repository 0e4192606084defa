"""Read-only access to a corpus of Markdown posts with YAML front matter."""

__version__ = "0.1.0"
