"""Data models for GTFS records and tables."""
