"""Single-station train departure register."""
