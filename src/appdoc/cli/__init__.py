"""Application document command line tool."""
