from welltracks.cli.app import main

main()
