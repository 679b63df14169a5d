"""
git_ignore.parsing – argparse definitions for the command line.
"""
