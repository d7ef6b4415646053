"""Text helpers shared by the parsers and models."""
