"""Shared utilities for the Ecosse core."""
