"""JSON file-backed stores."""
