"""Task Manager API."""
