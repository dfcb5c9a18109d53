"""
handlers/ - Presentation Layer
================================
Console routines. Each handler reads input from the terminal, delegates to
the appropriate Service, and prints the response.
No query logic lives here.
"""
