"""StudyBites: turns course material into chunks, outlines, key terms and summaries."""

__version__ = "0.1.0"
