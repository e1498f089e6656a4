from markupgen.cli import main

main()
