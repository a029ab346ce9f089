"""Filesystem and content helpers with no knowledge of fragments."""
