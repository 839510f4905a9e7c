from frostbloom.main import main

main()
