from sessiongate.main import main

main()
