"""Cosmogen - deterministic procedural universe generation."""
