"""Domain models for characters, monsters and battles."""
