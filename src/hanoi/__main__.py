from hanoi.app import main

main()
