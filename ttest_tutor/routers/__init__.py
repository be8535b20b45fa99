"""API routers for the paired t-test tutor."""
