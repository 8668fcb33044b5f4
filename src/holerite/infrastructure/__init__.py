"""Infrastructure adapters: file readers and record storage."""
