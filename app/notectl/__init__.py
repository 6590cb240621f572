"""notectl - discover and classify the note files of a managed corpus."""

__version__ = "0.1.0"
