from bankledger.cli import main

main()
