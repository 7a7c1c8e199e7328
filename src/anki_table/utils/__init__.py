"""Shared utilities: structured logging and atomic file writes."""
