"""linelink - shareable links to exact lines of files in a repository."""
