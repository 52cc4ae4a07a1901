"""Infrastructure layer - file access and other I/O."""
