"""Infrastructure layer — recipe documents and output file access."""
