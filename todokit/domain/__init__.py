"""Domain layer for todokit. Pure: no I/O, no logging, no frameworks."""
