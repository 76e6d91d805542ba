from galogger.cli import main

main()
