"""Release steps composed from API operations."""
