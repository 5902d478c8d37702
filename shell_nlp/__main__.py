from .nl_shell import main

main()
