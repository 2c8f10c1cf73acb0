from xccovreport.cli import main

main()
