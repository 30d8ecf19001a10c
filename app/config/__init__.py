"""Prompt configuration for image generation."""
