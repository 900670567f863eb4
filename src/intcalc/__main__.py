from intcalc.cli import main

main()
