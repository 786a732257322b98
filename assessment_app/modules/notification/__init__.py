"""Notification module: emails a report for every graded submission."""
