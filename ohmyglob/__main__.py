from ohmyglob.cli import main

main()
