"""
git_ignore.runtime – Application façade used by the CLI and programmatic callers.
"""
