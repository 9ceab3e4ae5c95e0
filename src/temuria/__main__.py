from temuria.cli import main

main()
