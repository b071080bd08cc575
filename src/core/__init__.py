"""Core del sitio: dominio, validación, sanitización e i18n (sin I/O)."""
