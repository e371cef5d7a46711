"""Feature modules of the CyberLearn application."""
