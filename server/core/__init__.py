"""Document model, composition and generation core."""
