"""Local key-value preferences storage."""
