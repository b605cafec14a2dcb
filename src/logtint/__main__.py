from logtint.cli import main

main()
