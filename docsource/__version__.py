"""Version information for the document source connector."""

__version__ = "0.3.0"

# Filled in by the release pipeline
__build_date__ = None
__commit_sha__ = None
