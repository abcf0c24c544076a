"""Capa CLI (Typer + Rich): entry point, REPL, comandos y diagnóstico."""
