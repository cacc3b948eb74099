"""Board scene, view and piece items."""
