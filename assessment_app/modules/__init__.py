"""Feature modules of the assessment app."""
