"""Core domain types shared by the pattern demonstrations."""
