"""Capa CLI (Typer + Rich). No contiene lógica de red propia."""
