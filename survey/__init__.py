"""Batch runner for rotation orbit censuses."""
