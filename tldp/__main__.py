from tldp.cli import main

main()
