"""Simulation configuration."""
