"""Configuration for Blackout Games."""
