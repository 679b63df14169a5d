from git_ignore.cli import main

main()
