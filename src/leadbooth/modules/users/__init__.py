"""Users module - reps and admins."""
