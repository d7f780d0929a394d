from fidlgen.cli import main

main()
