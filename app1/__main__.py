from app1.app import main

main()
