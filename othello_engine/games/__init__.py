"""Game rules packages."""
