from termconfig.cli import main

main()
