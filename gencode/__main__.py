from gencode.main import main

main()
