"""Services: local git operations."""
