from app2.app import main

main()
