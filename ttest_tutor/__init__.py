"""Paired t-test tutor: step-by-step paired-samples t-test walkthroughs."""

__version__ = "1.0.0"
