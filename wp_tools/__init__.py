"""Command-line tools for listing WordPress posts and removing duplicate drafts."""
