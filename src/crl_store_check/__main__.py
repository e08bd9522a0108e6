from crl_store_check.cli import main

main()
