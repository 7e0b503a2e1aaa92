"""Shared helpers for Taskline."""
