"""Request models and the output JSON Schema."""
