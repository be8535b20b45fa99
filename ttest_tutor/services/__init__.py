"""Service layer for the paired t-test tutor."""
