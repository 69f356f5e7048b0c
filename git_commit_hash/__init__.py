"""Generates a C# source file holding the git commit hash of the current HEAD."""
