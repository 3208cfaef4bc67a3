from crossrelease_tooling.cli.main import main

main()
