"""blogmd — convert a blog RSS export into Markdown posts with front matter."""

__version__ = "0.1.0"
