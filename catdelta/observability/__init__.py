"""Logging and metrics for catdelta."""
