"""Shared helpers for texttrimmer."""
