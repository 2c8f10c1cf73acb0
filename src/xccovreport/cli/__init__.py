from xccovreport.cli.exit_codes import EXIT_FAILURE, EXIT_OK
from xccovreport.cli.root import cli, create_app, main

__all__ = ["EXIT_FAILURE", "EXIT_OK", "cli", "create_app", "main"]
