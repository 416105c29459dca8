"""Runtime services shared across the editor."""
