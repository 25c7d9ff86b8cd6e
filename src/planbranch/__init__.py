"""Create git feature branches for task-manager plans."""
