"""chargrid sources."""
