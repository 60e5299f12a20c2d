"""Pure motion functions. They calculate positions and never modify text."""
