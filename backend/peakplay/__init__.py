"""PeakPlay performance scoring backend."""
