from jpre.cli.app import main

main()
