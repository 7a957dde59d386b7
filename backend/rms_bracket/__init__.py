"""RMS bracket structure engine and its HTTP API."""
