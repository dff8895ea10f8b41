"""REST API for the frame cut optimizer."""
