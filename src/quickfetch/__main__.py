from quickfetch.app import main

main()
