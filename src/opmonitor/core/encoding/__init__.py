"""Text encodings for log entries."""
