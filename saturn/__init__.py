"""Client for the Saturn team processing service."""
