"""Mayon Safe-Zone backend: hazard distance, evacuation centers and alert level."""
