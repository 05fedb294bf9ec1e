"""Domain apps of the SpotBnB project."""
